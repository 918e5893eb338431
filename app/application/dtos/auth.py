"""DTOs for authentication use cases."""

from dataclasses import dataclass

from app.application.dtos.user import UserResult


@dataclass(frozen=True)
class LoginResult:
    """Issued bearer token plus the authenticated user's projection."""

    access_token: str
    user: UserResult
    token_type: str = "bearer"
