"""
Error taxonomy for the analysis API.

Every error carries the HTTP status it maps to, a short ``error`` title and a
human readable ``message``; the API renders them as ``{"error", "message"}``.
"""

from typing import Dict


class AnalysisError(Exception):
    """Base class for errors surfaced to the HTTP caller."""

    status_code: int = 500
    error: str = "Analysis failed"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.error, "message": self.message}


class MethodNotAllowed(AnalysisError):
    status_code = 405
    error = "Method not allowed"


class AccessDenied(AnalysisError):
    """Request did not come from a browser, or its origin is not trusted."""

    status_code = 403
    error = "Access denied"


class MissingImage(AnalysisError):
    status_code = 400
    error = "No image provided"

    def __init__(self, message: str = "No image provided"):
        super().__init__(message)


class EmptyResponse(AnalysisError):
    """The provider answered but the message carried no text."""


class ProviderError(AnalysisError):
    """Opaque passthrough of a failed provider call."""
