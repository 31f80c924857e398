from __future__ import annotations

from .logger import AnalysisLogger
from .handlers import build_json_file_handler, build_console_handler
from .formatters import JSONFormatter

__all__ = [
    "AnalysisLogger",
    "build_json_file_handler",
    "build_console_handler",
    "JSONFormatter",
]
