"""Auth and token dependencies (composition root)."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.domain.exceptions import AuthenticationException
from app.infrastructure.security import BcryptPasswordHasher, JwtTokenIssuer
from app.shared.context import clear_current_user, set_current_user
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_http_bearer = HTTPBearer(auto_error=False)

BearerCredentials = Annotated[
    HTTPAuthorizationCredentials | None, Depends(_http_bearer)
]


def get_password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher()


def get_token_issuer() -> JwtTokenIssuer:
    return JwtTokenIssuer()


async def get_current_user_id_optional(
    credentials: BearerCredentials,
    tokens: Annotated[JwtTokenIssuer, Depends(get_token_issuer)],
) -> AsyncIterator[str | None]:
    """Resolve the caller from an optional bearer token and bind it as the request actor.

    Missing or invalid tokens leave the request anonymous (no actor).
    Async so the actor context is set in the request's own task.
    """
    user_id: str | None = None
    if credentials is not None:
        try:
            user_id = str(tokens.decode(credentials.credentials)["sub"])
        except ValueError:
            logger.debug("ignoring invalid bearer token on optional-auth route")
    if user_id:
        set_current_user(user_id)
    else:
        clear_current_user()
    try:
        yield user_id
    finally:
        clear_current_user()


async def get_current_user_id(
    user_id: Annotated[str | None, Depends(get_current_user_id_optional)],
    credentials: BearerCredentials,
) -> str:
    """Require a valid bearer token; raise AuthenticationException (401) otherwise."""
    if user_id is None:
        if credentials is None:
            raise AuthenticationException("Not authenticated")
        raise AuthenticationException("Could not validate credentials")
    return user_id
