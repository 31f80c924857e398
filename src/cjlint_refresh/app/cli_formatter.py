from __future__ import annotations

from collections import Counter

from ..core.domain.models import AnalysisResult


def format_analyze_result(result: AnalysisResult) -> str:
    """Format an analysis result for human-readable terminal output."""
    lines = [
        f"Package: {result.package_name}",
        f"Commit: {result.commit}",
        f"Findings: {len(result.cjlint)}",
    ]

    levels = Counter(f.defect_level.value for f in result.cjlint)
    for level, count in sorted(levels.items()):
        lines.append(f"  {level}: {count}")

    if result.cjlint:
        lines.append("")
    for f in result.cjlint:
        lines.append(
            f"{f.file}:{f.line}:{f.column} [{f.defect_level.value}] "
            f"{f.analyzer_name}: {f.description}"
        )

    return "\n".join(lines)
