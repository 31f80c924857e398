from __future__ import annotations

from ..domain.exceptions import InputError
from ..domain.models import AnalysisResult
from ..services import AnalysisOrchestrator


class AnalyzeUseCase:
    """Use case for refreshing the cached analysis of a repository.

    Thin layer that validates input and delegates to AnalysisOrchestrator.
    """

    def __init__(
        self,
        *,
        orchestrator: AnalysisOrchestrator,
    ) -> None:
        self._orchestrator = orchestrator

    def execute(self, *, repo_url: str | None) -> AnalysisResult:
        """Execute analysis workflow.

        Args:
            repo_url: Repository URL; None or blank is rejected

        Returns:
            Analysis result

        Raises:
            InputError: If repo_url is missing
        """
        if repo_url is None or not repo_url.strip():
            raise InputError("repo query parameter is required")
        return self._orchestrator.analyze(repo_url=repo_url)
