from pydantic import BaseModel, Field
from typing import Any, List, Optional


class AnalysisRequest(BaseModel):
    image_data: Optional[str] = None  # base64, no data: prefix
    mime_type: Optional[str] = None   # e.g. "image/jpeg"

    def missing_fields(self) -> List[str]:
        return [name for name in ("image_data", "mime_type") if not getattr(self, name)]


class ComplianceResult(BaseModel):
    """One checklist verdict as requested from the model"""
    id: int
    question: str
    findings: str
    compliance: str
    result: str
    confidence: int = Field(ge=1, le=5)


class AnalysisResponse(BaseModel):
    success: bool = True
    # Passed through as returned by the model
    analysis_results: Any


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
