"""
Common response models.

Error schema shared by every endpoint.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Error message")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class ProviderStatusResponse(BaseModel):
    """Which process-wide credentials are configured (never the values)."""

    openai: bool = Field(description="OPENAI_API_KEY configured")
    gemini: bool = Field(description="GEMINI_API_KEY configured")
    ai_edit: bool = Field(description="AI editing available")
