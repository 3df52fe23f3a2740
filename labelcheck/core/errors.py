"""
Error types for LabelCheck.

InvalidRequestError maps to HTTP 400, every AnalysisError to HTTP 500.
"""

from typing import Iterable, List, Optional


class LabelCheckError(Exception):
    """Base class for all LabelCheck errors"""


class InvalidRequestError(LabelCheckError):
    """Required request fields are missing"""

    def __init__(self, missing: Iterable[str]):
        self.missing: List[str] = list(missing)
        super().__init__(f"Missing: {', '.join(self.missing)}")


class AnalysisError(LabelCheckError):
    """The label could not be analysed"""


class ConfigurationError(AnalysisError):
    """Service credentials are not configured"""


class UpstreamError(AnalysisError):
    """AI service was unreachable or answered with a non-success status"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class EmptyResponseError(AnalysisError):
    """AI service answered without any usable text"""


class ExtractionError(AnalysisError):
    """No JSON value could be extracted from the AI text"""
