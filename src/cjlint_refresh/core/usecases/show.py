from __future__ import annotations

from ..ports import ResultCachePort


class ShowUseCase:
    """Use case for reading the last cached result of a repository."""

    def __init__(self, *, cache: ResultCachePort) -> None:
        self._cache = cache

    def execute(self, *, repo_url: str) -> str | None:
        return self._cache.load(repo_url)
