"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Rows are opaque to the services except for id; projections are application DTOs.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.common import ListQuery
    from app.application.dtos.user_role import UserRoleResult
    from app.domain.exceptions import ConflictException


class IDirectoryRepository(Protocol):
    """Protocol for a soft-delete directory repository (users, roles)."""

    entity_type: str
    unique_fields: tuple[str, ...]

    def to_result(self, obj: Any) -> Any:
        """Map a row to its application DTO."""

    def conflict_error(self, field: str | None = None) -> ConflictException:
        """Return the conflict raised when a live unique key is taken."""

    async def get_live(self, entity_id: str) -> Any | None:
        """Return the non-deleted row with entity_id."""

    async def get_deleted(self, entity_id: str) -> Any | None:
        """Return the soft-deleted row with entity_id."""

    async def get_live_many(self, entity_ids: Iterable[str]) -> list[Any]:
        """Return the non-deleted rows among entity_ids."""

    async def find_conflict(
        self, values: Mapping[str, Any], exclude_id: str | None = None
    ) -> str | None:
        """Return the unique field held by another live row, or None."""

    async def search(self, query: ListQuery) -> tuple[list[Any], int]:
        """Return one page of live rows and the total match count."""

    async def list_active(self) -> list[Any]:
        """Return live, active rows, newest first."""

    async def list_deleted(self) -> list[Any]:
        """Return soft-deleted rows, most recently updated first."""

    async def create_from(self, values: Mapping[str, Any]) -> Any:
        """Insert a row built from values."""

    async def apply_changes(self, obj: Any, changes: Mapping[str, Any]) -> Any:
        """Apply changes to obj and persist."""

    async def soft_delete(self, obj: Any) -> Any:
        """Mark obj deleted."""

    async def restore(self, obj: Any) -> Any:
        """Mark obj live again."""

    async def set_active(self, obj: Any, is_active: bool) -> Any:
        """Set obj.is_active."""

    async def bulk_set_active(self, entity_ids: Sequence[str], is_active: bool) -> int:
        """Set is_active on live rows in entity_ids; return rows changed."""

    async def hard_delete(self, entity_id: str) -> bool:
        """Physically remove the row and its dependents; False if absent."""


class IUserRepository(IDirectoryRepository, Protocol):
    """Protocol for the user directory (adds lookup by email for login)."""

    async def get_live_by_email(self, email: str) -> Any | None:
        """Return the non-deleted user with email."""


class IUserRoleRepository(Protocol):
    """Protocol for user-role assignments."""

    async def get_live_pair(self, user_id: str, role_id: str) -> Any | None:
        """Return the non-deleted mapping for the pair."""

    async def get_result(self, mapping_id: str) -> UserRoleResult | None:
        """Return the mapping projection with names."""

    async def list_for_user(self, user_id: str) -> list[UserRoleResult]:
        """Return live mappings of user_id, newest first."""

    async def list_for_role(self, role_id: str) -> list[UserRoleResult]:
        """Return live mappings of role_id, newest first."""

    async def live_role_ids(self, user_id: str, role_ids: Sequence[str]) -> set[str]:
        """Return the subset of role_ids already assigned to user_id."""

    async def assign(self, user_id: str, role_id: str, *, is_active: bool = True) -> Any:
        """Insert one live mapping."""

    async def assign_many(self, user_id: str, role_ids: Sequence[str]) -> int:
        """Insert one live mapping per role id."""

    async def unassign(self, mapping: Any) -> Any:
        """Soft-delete mapping."""

    async def unassign_many(self, user_id: str, role_ids: Sequence[str]) -> int:
        """Soft-delete live mappings for the user among role_ids."""

    async def set_active(self, mapping: Any, is_active: bool) -> Any:
        """Set mapping.is_active."""
