from .app.main import analyze, prepare_toolchain, cached_result

__all__ = [
    "analyze",
    "prepare_toolchain",
    "cached_result",
]

# stdlib logging defaults: attach NullHandler to prevent 'No handler' warnings
import logging
_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
