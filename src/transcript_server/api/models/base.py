"""Base response models for the API."""

from pydantic import BaseModel, Field


class BaseResponse(BaseModel):
    """Base response model."""

    success: bool = True


class ErrorResponse(BaseModel):
    """Error response body."""

    error: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    variant: str
