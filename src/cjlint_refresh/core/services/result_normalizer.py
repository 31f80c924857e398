from __future__ import annotations

import os
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..domain.exceptions import ParseError
from ..domain.models import AnalysisFinding


_FINDINGS = TypeAdapter(list[AnalysisFinding])


def parse_findings(raw: str | bytes) -> list[AnalysisFinding]:
    """Deserialize a cjlint JSON report into findings.

    Raises:
        ParseError: If the report is not valid JSON, not an array, or a
            finding does not match the schema
    """
    try:
        return _FINDINGS.validate_json(raw)
    except ValidationError as exc:
        raise ParseError(str(exc)) from exc


def strip_root(file: str, root: str) -> str:
    """Make file relative to root.

    Paths that do not start with root are returned unchanged.
    """
    root_with_sep = root if root.endswith(os.sep) else root + os.sep
    if file.startswith(root_with_sep):
        return file[len(root_with_sep):]
    if file.startswith(root):
        rest = file[len(root):]
        if rest.startswith(os.sep):
            rest = rest[1:]
        return rest
    return file


def normalize_paths(
    findings: list[AnalysisFinding],
    root: str | Path,
) -> list[AnalysisFinding]:
    """Rewrite absolute finding paths relative to the working copy root."""
    root_str = os.fspath(root)
    return [
        finding.model_copy(update={"file": strip_root(finding.file, root_str)})
        for finding in findings
    ]
