from __future__ import annotations

from pathlib import Path

from .config import AppConfig
from .container import Container
from ..core.domain.models import AnalysisResult


def _create_container(config: AppConfig | None = None) -> Container:
    """Create and initialize a container.

    Args:
        config: Optional config. If None, loads from environment variables.

    Returns:
        Initialized container instance
    """
    container = Container()

    if config is None:
        config = AppConfig()

    container.config.from_pydantic(config)
    container.init_resources()

    return container


def analyze(repo_url: str, *, config: AppConfig | None = None) -> AnalysisResult:
    """Analyze a repository with cjlint and cache the result.

    The toolchain is extracted first if it is not in place yet.

    Args:
        repo_url: Repository URL understood by git
        config: Optional config for testing. If None, loads from env vars.

    Returns:
        Analysis result (also written to the cache)

    Raises:
        PipelineError: If any pipeline stage fails
        ToolchainError: If cjlint cannot be extracted
    """
    container = _create_container(config)
    try:
        container.toolchain().ensure_extracted()
        return container.analyze_uc().execute(repo_url=repo_url)
    finally:
        container.shutdown_resources()


def prepare_toolchain(config: AppConfig | None = None) -> Path:
    """Extract the bundled cjlint toolchain if needed and return its executable."""
    container = _create_container(config)
    try:
        return container.toolchain().ensure_extracted()
    finally:
        container.shutdown_resources()


def cached_result(repo_url: str, config: AppConfig | None = None) -> str | None:
    """Return the cached serialized result for repo_url, if any."""
    container = _create_container(config)
    try:
        return container.show_uc().execute(repo_url=repo_url)
    finally:
        container.shutdown_resources()
