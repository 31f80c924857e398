from __future__ import annotations

from .result_normalizer import normalize_paths, parse_findings, strip_root
from .analysis_orchestrator import AnalysisOrchestrator

__all__ = [
    "normalize_paths",
    "parse_findings",
    "strip_root",
    "AnalysisOrchestrator",
]
