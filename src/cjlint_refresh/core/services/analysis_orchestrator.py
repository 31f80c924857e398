from __future__ import annotations

import time
from typing import Callable

from ..domain.models import AnalysisResult
from ..ports import (
    AnalyzerPort,
    LoggerPort,
    ManifestLocatorPort,
    ResultCachePort,
    WorkingCopyPort,
)
from .result_normalizer import normalize_paths, parse_findings


class AnalysisOrchestrator:
    """Runs the analysis pipeline for one repository.

    Stages run strictly in order: checkout, manifest lookup, analyzer run,
    parse and normalize, cache write. The first failing stage ends the run
    with its own exception; the working copy is released on every path.
    """

    def __init__(
        self,
        *,
        working_copies: WorkingCopyPort,
        manifests: ManifestLocatorPort,
        analyzer: AnalyzerPort,
        cache: ResultCachePort,
        logger: LoggerPort,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._working_copies = working_copies
        self._manifests = manifests
        self._analyzer = analyzer
        self._cache = cache
        self._logger = logger
        self._clock = clock

    def analyze(self, *, repo_url: str) -> AnalysisResult:
        """Analyze repo_url and cache the result.

        Args:
            repo_url: Repository URL understood by git

        Returns:
            The analysis result that was written to the cache

        Raises:
            PipelineError: Subclass matching the stage that failed
        """
        self._logger.info("clone_started", repo_url=repo_url)

        with self._working_copies.checkout(repo_url) as working_copy:
            self._logger.info(
                "working_copy_ready",
                path=str(working_copy.path),
                commit=working_copy.commit,
            )

            # 1) Package name from the manifest
            package_name = self._manifests.find_package_name(working_copy.path)
            self._logger.info("package_resolved", package_name=package_name)

            # 2) Analyzer report
            raw = self._analyzer.run(working_copy.path)
            self._logger.info("analyzer_finished", report_bytes=len(raw))

            # 3) Findings with repository-relative paths
            findings = normalize_paths(parse_findings(raw), working_copy.path)
            self._logger.info("findings_normalized", findings=len(findings))

            result = AnalysisResult(
                cjlint=findings,
                created_at=int(self._clock()),
                commit=working_copy.commit,
                package_name=package_name,
            )

            # 4) Last write wins
            self._cache.store(repo_url, result.to_json())
            self._logger.info("result_cached", repo_url=repo_url, commit=result.commit)

        return result
