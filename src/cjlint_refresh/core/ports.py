from __future__ import annotations

import secrets
import string
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Protocol

from .domain.models import WorkingCopy


class WorkingCopyPort(Protocol):
    """Port for ephemeral repository checkouts."""

    def acquire(self, repo_url: str) -> WorkingCopy:
        """Shallow-clone repo_url into a fresh directory.

        Raises:
            CloneError: If the directory cannot be prepared, the clone fails
                or HEAD cannot be resolved
        """
        ...

    def release(self, working_copy: WorkingCopy) -> None:
        """Remove the working copy from disk. Safe to call more than once."""
        ...

    def checkout(self, repo_url: str) -> AbstractContextManager[WorkingCopy]:
        """Acquire a working copy that is released when the block exits."""
        ...


class ManifestLocatorPort(Protocol):
    """Port for reading the package manifest of a checkout."""

    def find_package_name(self, root: Path) -> str:
        """Return package.name from the first manifest found under root.

        Raises:
            ManifestError: If no manifest exists or it cannot be parsed
        """
        ...


class AnalyzerPort(Protocol):
    """Port for the external static analyzer."""

    def run(self, root: Path) -> str:
        """Run the analyzer over root and return its raw JSON report.

        Raises:
            AnalyzerError: If the process fails or its report cannot be
                read or removed
        """
        ...


class ResultCachePort(Protocol):
    """Port for persisting serialized analysis results."""

    def store(self, repo_url: str, payload: str) -> None:
        ...

    def load(self, repo_url: str) -> str | None:
        ...


class NameGeneratorPort(Protocol):
    def generate(self) -> str:
        ...


class LoggerPort(Protocol):
    """Port for structured logging.

    Keyword arguments are attached to the record as structured fields.
    """

    def debug(self, message: str, **kwargs) -> None:
        ...

    def info(self, message: str, **kwargs) -> None:
        ...

    def warning(self, message: str, **kwargs) -> None:
        ...

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        ...

    def exception(self, message: str, **kwargs) -> None:
        ...


class DefaultNameGenerator:
    """Random alphanumeric names for per-request directories and files."""

    ALPHABET = string.ascii_letters + string.digits

    def __init__(self, length: int = 16) -> None:
        if length < 1:
            raise ValueError("length must be positive")
        self._length = length

    def generate(self) -> str:
        return "".join(secrets.choice(self.ALPHABET) for _ in range(self._length))
