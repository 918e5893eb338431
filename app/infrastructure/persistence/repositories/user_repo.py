"""User repository: live-scoped lookups and uniqueness on username/email. Returns UserResult via to_result."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserResult
from app.domain.exceptions import ConflictException, UserAlreadyExistsException
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.models.user_role import UserRoleMapping
from app.infrastructure.persistence.repositories.directory_repo import (
    DirectoryRepository,
)
from app.shared.utils.datetime import ensure_utc


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult (no password)."""
    return UserResult(
        id=u.id,
        username=u.username,
        email=u.email,
        first_name=u.first_name,
        last_name=u.last_name,
        date_of_birth=u.date_of_birth,
        is_active=u.is_active,
        is_deleted=u.is_deleted,
        created_at=ensure_utc(u.created_at),
        updated_at=ensure_utc(u.updated_at),
        created_by=u.created_by,
        updated_by=u.updated_by,
    )


class UserRepository(DirectoryRepository[User]):
    """User directory. Search covers username, email, first and last name."""

    entity_type = "user"
    unique_fields = ("username", "email")
    search_fields = ("username", "email", "first_name", "last_name")
    sortable_fields = (
        "created_at",
        "updated_at",
        "username",
        "email",
        "first_name",
        "last_name",
        "date_of_birth",
        "is_active",
    )

    def __init__(self, db: AsyncSession, *, search_case_sensitive: bool = True) -> None:
        super().__init__(db, User, search_case_sensitive=search_case_sensitive)

    def to_result(self, obj: User) -> UserResult:
        return _user_to_result(obj)

    def conflict_error(self, field: str | None = None) -> ConflictException:
        return UserAlreadyExistsException(field)

    async def get_live_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.email == email, User.is_deleted.is_(False))
        )
        return result.scalar_one_or_none()

    async def _before_hard_delete(self, entity_id: str) -> None:
        await self.db.execute(
            delete(UserRoleMapping).where(UserRoleMapping.user_id == entity_id)
        )
