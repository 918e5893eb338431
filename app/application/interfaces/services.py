"""Service interfaces (ports) for the application layer.

Protocols define contracts for credential handling (DIP).
"""

from __future__ import annotations

from typing import Any, Protocol


class IPasswordHasher(Protocol):
    """Protocol for password hashing (bcrypt in production)."""

    async def hash(self, password: str) -> str:
        """Return a salted hash of password."""

    async def verify(self, password: str, hashed_password: str | None) -> bool:
        """Return True if password matches. None is checked against a dummy hash."""


class ITokenIssuer(Protocol):
    """Protocol for access tokens."""

    def issue(self, user_id: str, email: str) -> str:
        """Return a signed token with sub and email claims."""

    def decode(self, token: str) -> dict[str, Any]:
        """Return the token payload; raise ValueError if invalid or expired."""
