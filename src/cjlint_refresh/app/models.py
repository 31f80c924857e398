from __future__ import annotations

from pydantic import BaseModel

from ..core.domain.models import AnalysisResult


class ApiResponse(BaseModel):
    """JSON envelope returned by every HTTP response."""

    success: bool
    message: str | None = None
    data: AnalysisResult | None = None
    error: str | None = None

    @classmethod
    def ok(cls, data: AnalysisResult, message: str) -> "ApiResponse":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, error: str) -> "ApiResponse":
        return cls(success=False, error=error)

    def to_content(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)
