"""Authentication API routes.

Provides the public sign-up and login endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from tasklist.domain.services import AuthService
from tasklist.infrastructure.api.dependencies import get_auth_service
from tasklist.infrastructure.api.schemas import (
    ErrorResponse,
    LoginRequest,
    MessageResponse,
    SignUpRequest,
    TokenResponse,
    ValidationErrorResponse,
)

router = APIRouter()


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={
        400: {"model": ValidationErrorResponse, "description": "Validation error"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def sign_up(
    request: SignUpRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponse:
    """Register a new user with email and password."""
    message = await auth_service.sign_up(
        email=request.email,
        password=request.password,
        nick_name=request.nick_name,
    )
    return MessageResponse(message=message)


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=TokenResponse,
    responses={
        400: {"model": ValidationErrorResponse, "description": "Validation error"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenResponse:
    """Exchange email and password for a bearer access token."""
    access_token = await auth_service.login(request.email, request.password)
    return TokenResponse(access_token=access_token)
