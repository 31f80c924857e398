from __future__ import annotations

import tempfile
from pathlib import Path

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_NAME = "cjlint_refresh"


def _temp_root() -> Path:
    return Path(tempfile.gettempdir())


class WorkspaceConfig(BaseSettings):
    """Where per-request working copies are created."""

    model_config = SettingsConfigDict(env_prefix="CJLINT_REFRESH_WORKSPACE__")

    root: Path = Field(
        default_factory=_temp_root,
        description="Parent directory of ephemeral working copies",
    )

    dir_prefix: str = Field(
        default="cjrepo_",
        description="Prefix of working copy directory names",
    )

    name_length: int = Field(
        default=16,
        ge=8,
        description="Length of the random suffix used for directory and report names",
    )


class ManifestConfig(BaseSettings):
    """Package manifest lookup."""

    model_config = SettingsConfigDict(env_prefix="CJLINT_REFRESH_MANIFEST__")

    filename: str = Field(
        default="cjpm.toml",
        description="Manifest file name searched recursively in the checkout",
    )


class ToolchainConfig(BaseSettings):
    """Private cjlint installation."""

    model_config = SettingsConfigDict(env_prefix="CJLINT_REFRESH_TOOLCHAIN__")

    home: Path = Field(
        default_factory=lambda: _temp_root() / "cj",
        description="Directory the toolchain is extracted into (also CANGJIE_HOME)",
    )

    archive: Path | None = Field(
        default=None,
        description="Bundled .tar.zst payload holding the toolchain",
    )

    executable: str = Field(
        default="tools/bin/cjlint",
        description="cjlint path relative to home",
    )


class AnalyzerConfig(BaseSettings):
    """cjlint invocation settings."""

    model_config = SettingsConfigDict(env_prefix="CJLINT_REFRESH_ANALYZER__")

    output_root: Path = Field(
        default_factory=_temp_root,
        description="Directory receiving the per-run JSON reports",
    )

    timeout_s: float | None = Field(
        default=None,
        gt=0,
        description="Kill cjlint after this many seconds (None = wait forever)",
    )

    @computed_field
    @property
    def output_dir(self) -> Path:
        """Report directory, created on first access."""
        self.output_root.mkdir(parents=True, exist_ok=True)
        return self.output_root


class CacheConfig(BaseSettings):
    """Result store. The URL is read from KV_URL by default."""

    model_config = SettingsConfigDict(env_prefix="KV_")

    url: str | None = Field(
        default=None,
        description="Redis connection URL",
    )

    namespace: str = Field(
        default="cjlint_",
        description="Prefix applied to repository URLs to form cache keys",
    )

    socket_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Redis socket timeout in seconds (None = no timeout)",
    )


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="CJLINT_REFRESH_LOGGING__")

    logger_name: str = Field(default=APP_NAME)

    level: str = Field(default="INFO", description="DEBUG, INFO, WARNING or ERROR")

    console_output: bool = Field(default=True)

    json_console: bool = Field(
        default=False,
        description="Emit JSON lines on stderr instead of human-readable text",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional JSONL file receiving every record",
    )


class ServerConfig(BaseSettings):
    """HTTP server settings."""

    model_config = SettingsConfigDict(env_prefix="CJLINT_REFRESH_SERVER__")

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)


class AppConfig(BaseSettings):
    """Root application configuration.

    All configuration is loaded from environment variables with CJLINT_REFRESH_ prefix.
    Use double underscore for nested config: CJLINT_REFRESH_TOOLCHAIN__ARCHIVE

    Example env vars:
        # Required
        export KV_URL=redis://localhost:6379/0
        export CJLINT_REFRESH_TOOLCHAIN__ARCHIVE=/opt/cjlint/cjlint.tar.zst

        # Optional (with defaults)
        export CJLINT_REFRESH_TOOLCHAIN__HOME=/tmp/cj
        export CJLINT_REFRESH_WORKSPACE__ROOT=/tmp
        export CJLINT_REFRESH_ANALYZER__TIMEOUT_S=300
        export CJLINT_REFRESH_CACHE__NAMESPACE=cjlint_
        export CJLINT_REFRESH_LOGGING__LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="CJLINT_REFRESH_",
        env_nested_delimiter="__",
        frozen=True,
        extra="forbid",
    )

    workspace: WorkspaceConfig = Field(default_factory=WorkspaceConfig)
    manifest: ManifestConfig = Field(default_factory=ManifestConfig)
    toolchain: ToolchainConfig = Field(default_factory=ToolchainConfig)
    analyzer: AnalyzerConfig = Field(default_factory=AnalyzerConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
