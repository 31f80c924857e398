from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


@dataclass
class WorkingCopy:
    """Ephemeral checkout of one repository, owned by a single request."""

    path: Path
    commit: str
    released: bool = False


class DefectLevel(str, Enum):
    MANDATORY = "MANDATORY"
    SUGGESTIONS = "SUGGESTIONS"


class AnalysisFinding(BaseModel):
    """One diagnostic emitted by cjlint.

    Field names follow the analyzer's JSON report (camelCase on the wire).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    file: str
    line: int
    column: int
    end_line: int = Field(alias="endLine")
    end_column: int = Field(alias="endColumn")
    analyzer_name: str = Field(alias="analyzerName")
    description: str
    defect_level: DefectLevel = Field(alias="defectLevel")
    defect_type: str = Field(alias="defectType")
    language: str


class AnalysisResult(BaseModel):
    """Externally visible artifact of one analysis run."""

    model_config = ConfigDict(frozen=True)

    cjlint: list[AnalysisFinding]
    created_at: int
    commit: str
    package_name: str

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
