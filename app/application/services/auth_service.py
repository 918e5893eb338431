"""Auth service: register, login (bearer token) and current-user lookup."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.application.dtos.auth import LoginResult
from app.application.dtos.user import UserResult
from app.application.interfaces.repositories import IUserRepository
from app.application.interfaces.services import IPasswordHasher, ITokenIssuer
from app.application.services.user_service import UserService
from app.domain.exceptions import AuthenticationException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """Authentication on top of the user directory."""

    def __init__(
        self,
        user_service: UserService,
        user_repo: IUserRepository,
        hasher: IPasswordHasher,
        tokens: ITokenIssuer,
    ) -> None:
        self._user_service = user_service
        self._user_repo = user_repo
        self._hasher = hasher
        self._tokens = tokens

    async def register(self, values: Mapping[str, Any]) -> UserResult:
        """Create a user (same conflict rules as the user directory)."""
        return await self._user_service.create(values)

    async def login(self, email: str, password: str) -> LoginResult:
        """Verify credentials of a live, active user and issue an access token.

        Unknown email, inactive user and wrong password all fail the same way;
        a dummy hash is verified when no user matches.
        """
        user = await self._user_repo.get_live_by_email(email)
        if user is None or not user.is_active:
            await self._hasher.verify(password, None)
            logger.info("login rejected: unknown or inactive account")
            raise AuthenticationException(_INVALID_CREDENTIALS)
        if not await self._hasher.verify(password, user.hashed_password):
            logger.info("login rejected for user %s: bad password", user.id)
            raise AuthenticationException(_INVALID_CREDENTIALS)
        logger.info("user %s logged in", user.id)
        return LoginResult(
            access_token=self._tokens.issue(user.id, user.email),
            user=self._user_repo.to_result(user),
        )

    async def me(self, user_id: str) -> UserResult:
        user = await self._user_repo.get_live(user_id)
        if user is None or not user.is_active:
            raise AuthenticationException("User not found or inactive")
        return self._user_repo.to_result(user)
