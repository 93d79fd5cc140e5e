"""Pydantic schemas for error responses."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Response body for domain and authentication errors."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")


class ValidationErrorDetail(BaseModel):
    """Detail for a single validation error."""

    field: str = Field(..., description="Field name that failed validation")
    message: str = Field(..., description="Human-readable error message")
    code: str | None = Field(None, description="Machine-readable error code")


class ValidationErrorResponse(BaseModel):
    """Response for validation errors."""

    error: str = Field(..., description="Error type")
    details: list[ValidationErrorDetail] = Field(..., description="List of validation errors")
