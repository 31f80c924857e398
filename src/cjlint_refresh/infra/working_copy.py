from __future__ import annotations

import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from git import GitError, Repo

from ..core.domain.exceptions import CleanupError, CloneError
from ..core.domain.models import WorkingCopy
from ..core.ports import LoggerPort, NameGeneratorPort
from ..shared.rmtree_force import rmtree_force


class WorkingCopyManager:
    """Creates and removes per-request shallow checkouts.

    Each checkout lives in ``<root>/<prefix><random>`` and is never shared
    between requests.
    """

    def __init__(
        self,
        *,
        root: Path,
        names: NameGeneratorPort,
        logger: LoggerPort,
        prefix: str = "cjrepo_",
    ) -> None:
        self._root = root
        self._names = names
        self._logger = logger
        self._prefix = prefix

    def new_path(self) -> Path:
        return self._root / f"{self._prefix}{self._names.generate()}"

    def acquire(self, repo_url: str) -> WorkingCopy:
        path = self.new_path()

        try:
            rmtree_force(path)
            path.mkdir(parents=True)
        except OSError as exc:
            raise CloneError(f"Failed to prepare {path}: {exc}") from exc

        try:
            commit = self._clone(repo_url, path)
        except CloneError:
            self._discard(path)
            raise

        return WorkingCopy(path=path, commit=commit)

    def release(self, working_copy: WorkingCopy) -> None:
        if working_copy.released:
            return

        path = working_copy.path
        try:
            rmtree_force(path)
        except OSError as exc:
            self._logger.warning(
                "working_copy_delete_retry",
                path=str(path),
                error=str(exc),
            )
            shutil.rmtree(path, ignore_errors=True)
            if path.exists():
                raise CleanupError(f"{path}: {exc}") from exc

        working_copy.released = True
        self._logger.info("working_copy_released", path=str(path))

    @contextmanager
    def checkout(self, repo_url: str) -> Iterator[WorkingCopy]:
        working_copy = self.acquire(repo_url)
        try:
            yield working_copy
        finally:
            try:
                self.release(working_copy)
            except CleanupError as exc:
                self._logger.warning(
                    "working_copy_cleanup_failed",
                    path=str(working_copy.path),
                    error=exc.describe(),
                )

    def _clone(self, repo_url: str, path: Path) -> str:
        try:
            repo = Repo.clone_from(
                repo_url,
                path,
                depth=1,
                env={"GIT_TERMINAL_PROMPT": "0"},
            )
        except GitError as exc:
            raise CloneError(str(exc)) from exc

        try:
            return repo.head.commit.hexsha
        except (ValueError, GitError) as exc:
            raise CloneError(f"Cannot resolve HEAD: {exc}") from exc
        finally:
            repo.close()

    def _discard(self, path: Path) -> None:
        try:
            rmtree_force(path)
        except OSError as exc:
            self._logger.warning(
                "working_copy_cleanup_failed",
                path=str(path),
                error=str(exc),
            )
