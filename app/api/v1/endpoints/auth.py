"""Auth API: register, login (bearer token) and current user."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import (
    get_auth_service,
    get_auth_service_for_write,
    get_current_user_id,
)
from app.application.services import AuthService
from app.core.limiter import limit_auth, limit_register
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from app.schemas.user import UserResponse

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=201)
@limit_register
async def register(
    request: Request,
    body: RegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service_for_write)],
):
    """Register a new user (public endpoint). 409 if username or email is taken."""
    user = await auth_service.register(body.model_dump())
    return UserResponse.model_validate(user)


@router.post("/login", response_model=TokenResponse)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Authenticate with email and password; return JWT and the user."""
    result = await auth_service.login(body.email, body.password)
    return TokenResponse(
        access_token=result.access_token,
        token_type=result.token_type,
        user=UserResponse.model_validate(result.user),
    )


@router.get("/me", response_model=UserResponse)
async def get_me(
    user_id: Annotated[str, Depends(get_current_user_id)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Return the authenticated user. 401 without a valid bearer token."""
    return UserResponse.model_validate(await auth_service.me(user_id))
