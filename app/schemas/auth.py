"""Auth API schemas."""

from pydantic import BaseModel, EmailStr, Field

from app.schemas.user import UserCreateRequest, UserResponse


class LoginRequest(BaseModel):
    """Request body for login by email and password."""

    email: EmailStr
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")


class RegisterRequest(UserCreateRequest):
    """Request body for public registration (same fields as user creation)."""


class TokenResponse(BaseModel):
    """JWT token response with the authenticated user."""

    access_token: str
    token_type: str = "bearer"
    user: UserResponse
