"""Assignment service: user-role mappings (assign, list, unassign, status, bulk)."""

from __future__ import annotations

from collections.abc import Sequence

from app.application.dtos.common import BulkAssignResult, BulkUnassignResult
from app.application.dtos.user_role import UserRoleResult
from app.application.interfaces.repositories import (
    IDirectoryRepository,
    IUserRoleRepository,
)
from app.domain.exceptions import (
    DuplicateAssignmentException,
    ResourceNotFoundException,
    ValidationException,
)
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def _unique(ids: Sequence[str]) -> list[str]:
    """Drop repeated ids, keeping first-seen order."""
    return list(dict.fromkeys(ids))


class AssignmentService:
    """Links live users to live roles. At most one live mapping per pair."""

    def __init__(
        self,
        user_repo: IDirectoryRepository,
        role_repo: IDirectoryRepository,
        user_role_repo: IUserRoleRepository,
    ) -> None:
        self._user_repo = user_repo
        self._role_repo = role_repo
        self._user_role_repo = user_role_repo

    async def _require_user(self, user_id: str) -> None:
        if await self._user_repo.get_live(user_id) is None:
            raise ResourceNotFoundException("user", user_id)

    async def _require_role(self, role_id: str) -> None:
        if await self._role_repo.get_live(role_id) is None:
            raise ResourceNotFoundException("role", role_id)

    async def _get_pair_or_404(self, user_id: str, role_id: str):
        mapping = await self._user_role_repo.get_live_pair(user_id, role_id)
        if mapping is None:
            raise ResourceNotFoundException("user_role", f"{user_id}:{role_id}")
        return mapping

    async def _result(self, mapping_id: str) -> UserRoleResult:
        result = await self._user_role_repo.get_result(mapping_id)
        if result is None:
            raise ResourceNotFoundException("user_role", mapping_id)
        return result

    async def assign(
        self, user_id: str, role_id: str, *, is_active: bool = True
    ) -> UserRoleResult:
        """Assign role to user. Conflict if already assigned (live mapping)."""
        await self._require_user(user_id)
        await self._require_role(role_id)
        if await self._user_role_repo.get_live_pair(user_id, role_id) is not None:
            raise DuplicateAssignmentException(
                "User already has this role assigned",
                assignment_type="user_role",
                details_extra={"user_id": user_id, "role_id": role_id},
            )
        mapping = await self._user_role_repo.assign(user_id, role_id, is_active=is_active)
        return await self._result(mapping.id)

    async def list_for_user(self, user_id: str) -> list[UserRoleResult]:
        await self._require_user(user_id)
        return await self._user_role_repo.list_for_user(user_id)

    async def list_for_role(self, role_id: str) -> list[UserRoleResult]:
        await self._require_role(role_id)
        return await self._user_role_repo.list_for_role(role_id)

    async def unassign(self, user_id: str, role_id: str) -> None:
        mapping = await self._get_pair_or_404(user_id, role_id)
        await self._user_role_repo.unassign(mapping)

    async def set_status(
        self, user_id: str, role_id: str, is_active: bool
    ) -> UserRoleResult:
        mapping = await self._get_pair_or_404(user_id, role_id)
        updated = await self._user_role_repo.set_active(mapping, is_active)
        return await self._result(updated.id)

    async def bulk_assign(
        self, user_id: str, role_ids: Sequence[str]
    ) -> BulkAssignResult:
        """Assign every role in role_ids not yet assigned. All role ids must resolve to live roles."""
        if not role_ids:
            raise ValidationException("role_ids must not be empty", field="role_ids")
        wanted = _unique(role_ids)
        await self._require_user(user_id)
        found = {r.id for r in await self._role_repo.get_live_many(wanted)}
        missing = [r for r in wanted if r not in found]
        if missing:
            raise ResourceNotFoundException("role", ", ".join(missing))
        existing = await self._user_role_repo.live_role_ids(user_id, wanted)
        new_ids = [r for r in wanted if r not in existing]
        if existing:
            logger.debug(
                "bulk assign for user %s skipped %d existing roles",
                user_id,
                len(existing),
            )
        count = await self._user_role_repo.assign_many(user_id, new_ids)
        return BulkAssignResult(success=True, assigned_count=count)

    async def bulk_unassign(
        self, user_id: str, role_ids: Sequence[str]
    ) -> BulkUnassignResult:
        if not role_ids:
            raise ValidationException("role_ids must not be empty", field="role_ids")
        count = await self._user_role_repo.unassign_many(user_id, _unique(role_ids))
        return BulkUnassignResult(success=True, removed_count=count)
