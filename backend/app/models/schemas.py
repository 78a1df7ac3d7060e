"""
Pydantic models for API responses.
"""

from pydantic import BaseModel, ConfigDict, Field


class AnalyzeResponse(BaseModel):
    """Successful image analysis."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    ocr_result: str = Field(..., alias="ocrResult", description="Recognized problem text")
    commands: str = Field(..., description="Newline-separated GeoGebra commands")


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""
    error: str
    message: str
