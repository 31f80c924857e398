"""Domain exceptions for cjlint_refresh.

Every pipeline stage raises its own subclass of :class:`PipelineError`. The
HTTP layer turns them into the response envelope using ``summary`` and
``status_code``.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base class for failures that end an analysis request."""

    summary: str | None = None
    status_code: int = 500

    def __init__(self, message: str, *, summary: str | None = None) -> None:
        super().__init__(message)
        if summary is not None:
            self.summary = summary

    def describe(self) -> str:
        """Return the human-readable cause, prefixed with the stage summary."""
        if self.summary:
            return f"{self.summary}: {self}"
        return str(self)


class InputError(PipelineError):
    """Raised when a request parameter is missing or invalid."""

    status_code = 400


class CloneError(PipelineError):
    summary = "Failed to clone repository"


class ManifestError(PipelineError):
    summary = "Failed to find package name"


class AnalyzerError(PipelineError):
    summary = "Failed to run cjlint"


class ParseError(PipelineError):
    summary = "Failed to parse cjlint output"


class CacheError(PipelineError):
    summary = "Failed to save to cache"


class CleanupError(PipelineError):
    """Raised when a working copy could not be removed from disk.

    Only ever logged; it never replaces the outcome of the request.
    """

    summary = "Failed to clean up working copy"


class ToolchainError(Exception):
    """Raised when the bundled analyzer toolchain cannot be extracted."""
