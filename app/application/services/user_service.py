"""User application service: directory operations with password hashing."""

from __future__ import annotations

from typing import Any

from app.application.dtos.user import UserResult
from app.application.interfaces.repositories import IUserRepository
from app.application.interfaces.services import IPasswordHasher
from app.application.services.directory_service import DirectoryService


class UserService(DirectoryService[UserResult]):
    """User directory. Plaintext passwords are hashed before they reach the repository."""

    clearable_fields = ("last_name", "date_of_birth")

    def __init__(
        self,
        user_repo: IUserRepository,
        hasher: IPasswordHasher,
        *,
        max_page_size: int = 100,
    ) -> None:
        super().__init__(user_repo, max_page_size=max_page_size)
        self._hasher = hasher

    async def _prepare(self, values: dict[str, Any]) -> dict[str, Any]:
        password = values.pop("password", None)
        if password is not None:
            values["hashed_password"] = await self._hasher.hash(password)
        return values
