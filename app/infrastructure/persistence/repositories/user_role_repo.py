"""UserRole repository: user-role assignments with soft delete (single entity responsibility)."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import Select, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user_role import UserRoleResult
from app.domain.exceptions import DuplicateAssignmentException
from app.infrastructure.persistence.models.role import Role
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.models.user_role import UserRoleMapping
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.context import get_current_actor_id
from app.shared.enums import AuditAction
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import ensure_utc, utc_now

logger = get_logger(__name__)


def _mapping_to_result(m: UserRoleMapping, role_name: str, username: str) -> UserRoleResult:
    return UserRoleResult(
        id=m.id,
        user_id=m.user_id,
        role_id=m.role_id,
        role_name=role_name,
        username=username,
        is_active=m.is_active,
        is_deleted=m.is_deleted,
        created_at=ensure_utc(m.created_at),
        updated_at=ensure_utc(m.updated_at),
        created_by=m.created_by,
        updated_by=m.updated_by,
    )


def _duplicate(user_id: str, role_id: str | None = None) -> DuplicateAssignmentException:
    extra = {"user_id": user_id}
    if role_id is not None:
        extra["role_id"] = role_id
    return DuplicateAssignmentException(
        "User already has this role assigned",
        assignment_type="user_role",
        details_extra=extra,
    )


class UserRoleRepository(BaseRepository[UserRoleMapping]):
    """User-role link table only. Assign, list, soft-unassign and status changes."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, UserRoleMapping)

    def _with_names(self) -> Select:
        return (
            select(UserRoleMapping, Role.name, User.username)
            .join(Role, Role.id == UserRoleMapping.role_id)
            .join(User, User.id == UserRoleMapping.user_id)
        )

    async def get_live_pair(self, user_id: str, role_id: str) -> UserRoleMapping | None:
        result = await self.db.execute(
            select(UserRoleMapping).where(
                UserRoleMapping.user_id == user_id,
                UserRoleMapping.role_id == role_id,
                UserRoleMapping.is_deleted.is_(False),
            )
        )
        return result.scalar_one_or_none()

    async def get_result(self, mapping_id: str) -> UserRoleResult | None:
        """Return the mapping with role and user names, or None."""
        row = (
            await self.db.execute(
                self._with_names().where(UserRoleMapping.id == mapping_id)
            )
        ).first()
        if row is None:
            return None
        mapping, role_name, username = row
        return _mapping_to_result(mapping, role_name, username)

    async def list_for_user(self, user_id: str) -> list[UserRoleResult]:
        result = await self.db.execute(
            self._with_names()
            .where(
                UserRoleMapping.user_id == user_id,
                UserRoleMapping.is_deleted.is_(False),
            )
            .order_by(UserRoleMapping.created_at.desc(), UserRoleMapping.id.asc())
        )
        return [_mapping_to_result(m, rn, un) for m, rn, un in result.all()]

    async def list_for_role(self, role_id: str) -> list[UserRoleResult]:
        result = await self.db.execute(
            self._with_names()
            .where(
                UserRoleMapping.role_id == role_id,
                UserRoleMapping.is_deleted.is_(False),
            )
            .order_by(UserRoleMapping.created_at.desc(), UserRoleMapping.id.asc())
        )
        return [_mapping_to_result(m, rn, un) for m, rn, un in result.all()]

    async def live_role_ids(self, user_id: str, role_ids: Sequence[str]) -> set[str]:
        """Return which of role_ids already have a live mapping for user_id."""
        if not role_ids:
            return set()
        result = await self.db.execute(
            select(UserRoleMapping.role_id).where(
                UserRoleMapping.user_id == user_id,
                UserRoleMapping.role_id.in_(list(role_ids)),
                UserRoleMapping.is_deleted.is_(False),
            )
        )
        return set(result.scalars().all())

    async def assign(
        self, user_id: str, role_id: str, *, is_active: bool = True
    ) -> UserRoleMapping:
        """Insert a live mapping. The partial unique index rejects a second live pair."""
        mapping = UserRoleMapping(user_id=user_id, role_id=role_id, is_active=is_active)
        try:
            created = await self.create(mapping)
        except IntegrityError:
            raise _duplicate(user_id, role_id) from None
        logger.info(
            "role %s %s to user %s by %s",
            role_id,
            AuditAction.ASSIGNED.value,
            user_id,
            get_current_actor_id() or "system",
        )
        return created

    async def assign_many(self, user_id: str, role_ids: Sequence[str]) -> int:
        """Insert one live, active mapping per role id in a single flush."""
        if not role_ids:
            return 0
        actor_id = get_current_actor_id()
        self.db.add_all(
            [
                UserRoleMapping(
                    user_id=user_id,
                    role_id=role_id,
                    is_active=True,
                    created_by=actor_id,
                    updated_by=actor_id,
                )
                for role_id in role_ids
            ]
        )
        try:
            await self.db.flush()
        except IntegrityError:
            raise _duplicate(user_id) from None
        logger.info(
            "%d roles %s to user %s", len(role_ids), AuditAction.ASSIGNED.value, user_id
        )
        return len(role_ids)

    async def unassign(self, mapping: UserRoleMapping) -> UserRoleMapping:
        mapping.is_deleted = True
        updated = await self.update(mapping)
        logger.info(
            "role %s %s from user %s",
            mapping.role_id,
            AuditAction.UNASSIGNED.value,
            mapping.user_id,
        )
        return updated

    async def unassign_many(self, user_id: str, role_ids: Sequence[str]) -> int:
        """Soft-delete the live mappings for user_id among role_ids; return how many."""
        if not role_ids:
            return 0
        result = await self.db.execute(
            update(UserRoleMapping)
            .where(
                UserRoleMapping.user_id == user_id,
                UserRoleMapping.role_id.in_(list(role_ids)),
                UserRoleMapping.is_deleted.is_(False),
            )
            .values(
                is_deleted=True,
                updated_at=utc_now(),
                updated_by=get_current_actor_id(),
            )
        )
        count = result.rowcount or 0
        logger.info(
            "%d roles %s from user %s", count, AuditAction.UNASSIGNED.value, user_id
        )
        return count

    async def set_active(self, mapping: UserRoleMapping, is_active: bool) -> UserRoleMapping:
        mapping.is_active = is_active
        updated = await self.update(mapping)
        logger.info(
            "user_role %s %s is_active=%s",
            mapping.id,
            AuditAction.STATUS_CHANGED.value,
            is_active,
        )
        return updated
