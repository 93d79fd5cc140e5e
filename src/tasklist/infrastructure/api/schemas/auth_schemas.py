"""Pydantic schemas for authentication endpoints."""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, Field

from tasklist.infrastructure.api.schemas.base import CamelModel


def _check_email_format(value: str) -> str:
    """Validate the address format and return it unchanged.

    Emails are stored and compared exactly as sent, so the normalized
    form produced by the validator is discarded.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(str(e)) from e
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email_format)]


class SignUpRequest(CamelModel):
    """Request body for sign-up."""

    email: EmailAddress = Field(..., description="User's email address")
    password: str = Field(..., min_length=5, description="User's password")
    nick_name: str | None = Field(None, max_length=255, description="Optional display name")


class LoginRequest(CamelModel):
    """Request body for login."""

    email: EmailAddress = Field(..., description="User's email address")
    password: str = Field(..., min_length=5, description="User's password")


class MessageResponse(CamelModel):
    """Plain acknowledgement response."""

    message: str = Field(..., description="Acknowledgement message")


class TokenResponse(CamelModel):
    """Response for a successful login."""

    access_token: str = Field(..., description="JWT access token")
