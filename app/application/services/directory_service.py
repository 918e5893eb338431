"""Directory service: create, read, list, update and lifecycle of a soft-deletable entity.

One implementation serves users and roles; the repository supplies the
entity's unique, searchable and sortable fields.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from app.application.dtos.common import BulkStatusResult, ListQuery, PageResult
from app.application.interfaces.repositories import IDirectoryRepository
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class DirectoryService[ResultT]:
    """Soft-delete aware directory operations. All reads see live rows only."""

    # Keys whose explicit None in an update clears the column; other None values are ignored.
    clearable_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, repo: IDirectoryRepository, *, max_page_size: int = 100) -> None:
        self._repo = repo
        self._max_page_size = max_page_size

    @property
    def entity_type(self) -> str:
        return self._repo.entity_type

    async def _prepare(self, values: dict[str, Any]) -> dict[str, Any]:
        """Transform validated input into column values (e.g. hash a password)."""
        return values

    async def _get_live_or_404(self, entity_id: str) -> Any:
        obj = await self._repo.get_live(entity_id)
        if obj is None:
            logger.debug("%s %s not found", self.entity_type, entity_id)
            raise ResourceNotFoundException(self.entity_type, entity_id)
        return obj

    async def _ensure_unique(
        self, values: Mapping[str, Any], exclude_id: str | None = None
    ) -> None:
        field = await self._repo.find_conflict(values, exclude_id=exclude_id)
        if field is not None:
            logger.info("%s conflict on %s", self.entity_type, field)
            raise self._repo.conflict_error(field)

    async def create(self, values: Mapping[str, Any]) -> ResultT:
        """Create a live row. Conflict if a live row already holds a unique key."""
        data = {k: v for k, v in values.items() if v is not None}
        await self._ensure_unique(data)
        row = await self._repo.create_from(await self._prepare(data))
        return self._repo.to_result(row)

    async def get(self, entity_id: str) -> ResultT:
        return self._repo.to_result(await self._get_live_or_404(entity_id))

    async def list(self, query: ListQuery) -> PageResult[ResultT]:
        """Filter, sort and paginate live rows."""
        if query.page < 1:
            raise ValidationException("page must be >= 1", field="page")
        if not 1 <= query.limit <= self._max_page_size:
            raise ValidationException(
                f"limit must be between 1 and {self._max_page_size}", field="limit"
            )
        rows, total = await self._repo.search(query)
        return PageResult(
            items=[self._repo.to_result(r) for r in rows],
            total=total,
            page=query.page,
            limit=query.limit,
        )

    async def update(self, entity_id: str, changes: Mapping[str, Any]) -> ResultT:
        """Apply a partial update. Conflict if a changed unique key is held by another live row."""
        obj = await self._get_live_or_404(entity_id)
        data = {
            k: v
            for k, v in changes.items()
            if v is not None or k in self.clearable_fields
        }
        await self._ensure_unique(data, exclude_id=obj.id)
        updated = await self._repo.apply_changes(obj, await self._prepare(data))
        return self._repo.to_result(updated)

    async def soft_delete(self, entity_id: str) -> None:
        obj = await self._get_live_or_404(entity_id)
        await self._repo.soft_delete(obj)

    async def hard_delete(self, entity_id: str) -> None:
        """Remove the row (deleted or not) and its assignments."""
        if not await self._repo.hard_delete(entity_id):
            raise ResourceNotFoundException(self.entity_type, entity_id)

    async def activate(self, entity_id: str) -> ResultT:
        obj = await self._get_live_or_404(entity_id)
        return self._repo.to_result(await self._repo.set_active(obj, True))

    async def deactivate(self, entity_id: str) -> ResultT:
        obj = await self._get_live_or_404(entity_id)
        return self._repo.to_result(await self._repo.set_active(obj, False))

    async def restore(self, entity_id: str) -> ResultT:
        """Undo a soft delete. Conflict if a live row took over its unique key meanwhile."""
        obj = await self._repo.get_deleted(entity_id)
        if obj is None:
            raise ResourceNotFoundException(self.entity_type, entity_id)
        keys = {f: getattr(obj, f) for f in self._repo.unique_fields}
        await self._ensure_unique(keys, exclude_id=obj.id)
        return self._repo.to_result(await self._repo.restore(obj))

    async def list_active(self) -> list[ResultT]:
        return [self._repo.to_result(r) for r in await self._repo.list_active()]

    async def list_deleted(self) -> list[ResultT]:
        return [self._repo.to_result(r) for r in await self._repo.list_deleted()]

    async def bulk_set_active(
        self, entity_ids: Sequence[str], is_active: bool
    ) -> BulkStatusResult:
        """Set is_active on every live row in entity_ids in one statement."""
        if not entity_ids:
            raise ValidationException("ids must not be empty", field="ids")
        count = await self._repo.bulk_set_active(
            list(dict.fromkeys(entity_ids)), is_active
        )
        return BulkStatusResult(success=True, updated_count=count)
