"""Role repository: live-scoped lookups and name uniqueness. Returns RoleResult via to_result."""

from __future__ import annotations

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.role import RoleResult
from app.domain.exceptions import ConflictException, RoleAlreadyExistsException
from app.infrastructure.persistence.models.role import Role
from app.infrastructure.persistence.models.user_role import UserRoleMapping
from app.infrastructure.persistence.repositories.directory_repo import (
    DirectoryRepository,
)
from app.shared.utils.datetime import ensure_utc


def _role_to_result(r: Role) -> RoleResult:
    return RoleResult(
        id=r.id,
        name=r.name,
        is_active=r.is_active,
        is_deleted=r.is_deleted,
        created_at=ensure_utc(r.created_at),
        updated_at=ensure_utc(r.updated_at),
        created_by=r.created_by,
        updated_by=r.updated_by,
    )


class RoleRepository(DirectoryRepository[Role]):
    """Role directory. Search covers name."""

    entity_type = "role"
    unique_fields = ("name",)
    search_fields = ("name",)
    sortable_fields = ("created_at", "updated_at", "name", "is_active")

    def __init__(self, db: AsyncSession, *, search_case_sensitive: bool = True) -> None:
        super().__init__(db, Role, search_case_sensitive=search_case_sensitive)

    def to_result(self, obj: Role) -> RoleResult:
        return _role_to_result(obj)

    def conflict_error(self, field: str | None = None) -> ConflictException:
        return RoleAlreadyExistsException()

    async def _before_hard_delete(self, entity_id: str) -> None:
        await self.db.execute(
            delete(UserRoleMapping).where(UserRoleMapping.role_id == entity_id)
        )
