"""Directory repository: soft-delete aware CRUD, search and bulk status for directory entities.

Concrete repositories declare which columns are unique among live rows,
which are searched, which are sortable, and how to map rows to DTOs.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, ClassVar

from sqlalchemy import ColumnElement, delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.common import ListQuery
from app.domain.exceptions import ConflictException, ValidationException
from app.infrastructure.persistence.models.mixins import DirectoryModel
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.context import get_current_actor_id
from app.shared.enums import AuditAction, SortOrder
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class DirectoryRepository[ModelType: DirectoryModel](BaseRepository[ModelType]):
    """Soft-delete repository. "Live" means is_deleted is false.

    Subclasses set entity_type, unique_fields, search_fields and
    sortable_fields, and implement to_result and conflict_error.
    """

    entity_type: ClassVar[str] = "resource"
    unique_fields: ClassVar[tuple[str, ...]] = ()
    search_fields: ClassVar[tuple[str, ...]] = ()
    sortable_fields: ClassVar[tuple[str, ...]] = (
        "created_at",
        "updated_at",
        "is_active",
    )

    def __init__(
        self,
        db: AsyncSession,
        model: type[ModelType],
        *,
        search_case_sensitive: bool = True,
    ) -> None:
        super().__init__(db, model)
        self._search_case_sensitive = search_case_sensitive

    def to_result(self, obj: ModelType) -> Any:
        raise NotImplementedError

    def conflict_error(self, field: str | None = None) -> ConflictException:
        """Return the domain conflict raised when a live unique key is taken."""
        raise NotImplementedError

    # Reads

    async def get_live(self, entity_id: str) -> ModelType | None:
        result = await self.db.execute(
            select(self.model).where(
                self.model.id == entity_id, self.model.is_deleted.is_(False)
            )
        )
        return result.scalar_one_or_none()

    async def get_deleted(self, entity_id: str) -> ModelType | None:
        result = await self.db.execute(
            select(self.model).where(
                self.model.id == entity_id, self.model.is_deleted.is_(True)
            )
        )
        return result.scalar_one_or_none()

    async def get_live_many(self, entity_ids: Iterable[str]) -> list[ModelType]:
        ids = list(entity_ids)
        if not ids:
            return []
        result = await self.db.execute(
            select(self.model).where(
                self.model.id.in_(ids), self.model.is_deleted.is_(False)
            )
        )
        return list(result.scalars().all())

    async def find_conflict(
        self, values: Mapping[str, Any], exclude_id: str | None = None
    ) -> str | None:
        """Return the first unique field whose value is held by another live row, else None."""
        for field in self.unique_fields:
            value = values.get(field)
            if value is None:
                continue
            stmt = select(self.model.id).where(
                getattr(self.model, field) == value,
                self.model.is_deleted.is_(False),
            )
            if exclude_id is not None:
                stmt = stmt.where(self.model.id != exclude_id)
            if (await self.db.execute(stmt.limit(1))).first() is not None:
                return field
        return None

    def _search_clause(self, term: str) -> ColumnElement[bool]:
        columns = [getattr(self.model, name) for name in self.search_fields]
        if self._search_case_sensitive:
            return or_(*(c.contains(term, autoescape=True) for c in columns))
        return or_(*(c.icontains(term, autoescape=True) for c in columns))

    def _order_by(self, sort_by: str, sort_order: SortOrder) -> list[Any]:
        if sort_by not in self.sortable_fields:
            raise ValidationException(
                f"Cannot sort by '{sort_by}'. Allowed: {', '.join(self.sortable_fields)}",
                field="sort_by",
            )
        column = getattr(self.model, sort_by)
        primary = column.asc() if sort_order == SortOrder.ASC else column.desc()
        return [primary, self.model.id.asc()]

    async def search(self, query: ListQuery) -> tuple[list[ModelType], int]:
        """Return one page of live rows matching query, plus the total match count."""
        conditions: list[ColumnElement[bool]] = [self.model.is_deleted.is_(False)]
        if query.search:
            conditions.append(self._search_clause(query.search))
        if query.is_active is not None:
            conditions.append(self.model.is_active.is_(query.is_active))
        order_by = self._order_by(query.sort_by, query.sort_order)

        total = (
            await self.db.execute(
                select(func.count()).select_from(self.model).where(*conditions)
            )
        ).scalar_one()
        result = await self.db.execute(
            select(self.model)
            .where(*conditions)
            .order_by(*order_by)
            .offset(query.offset)
            .limit(query.limit)
        )
        return list(result.scalars().all()), total

    async def list_active(self) -> list[ModelType]:
        result = await self.db.execute(
            select(self.model)
            .where(self.model.is_deleted.is_(False), self.model.is_active.is_(True))
            .order_by(self.model.created_at.desc(), self.model.id.asc())
        )
        return list(result.scalars().all())

    async def list_deleted(self) -> list[ModelType]:
        result = await self.db.execute(
            select(self.model)
            .where(self.model.is_deleted.is_(True))
            .order_by(self.model.updated_at.desc(), self.model.id.asc())
        )
        return list(result.scalars().all())

    # Writes

    async def create(self, obj: ModelType) -> ModelType:
        """Insert obj; a live unique-key collision raises the entity's conflict."""
        try:
            return await super().create(obj)
        except IntegrityError:
            raise self.conflict_error() from None

    async def update(self, obj: ModelType) -> ModelType:
        try:
            return await super().update(obj)
        except IntegrityError:
            raise self.conflict_error() from None

    async def create_from(self, values: Mapping[str, Any]) -> ModelType:
        return await self.create(self.model(**values))

    async def apply_changes(
        self, obj: ModelType, changes: Mapping[str, Any]
    ) -> ModelType:
        for key, value in changes.items():
            setattr(obj, key, value)
        return await self.update(obj)

    async def soft_delete(self, obj: ModelType) -> ModelType:
        obj.is_deleted = True
        updated = await self.update(obj)
        self._log(AuditAction.DELETED, updated.id)
        return updated

    async def restore(self, obj: ModelType) -> ModelType:
        obj.is_deleted = False
        updated = await self.update(obj)
        self._log(AuditAction.RESTORED, updated.id)
        return updated

    async def set_active(self, obj: ModelType, is_active: bool) -> ModelType:
        obj.is_active = is_active
        updated = await self.update(obj)
        self._log(
            AuditAction.ACTIVATED if is_active else AuditAction.DEACTIVATED, updated.id
        )
        return updated

    async def bulk_set_active(self, entity_ids: Sequence[str], is_active: bool) -> int:
        """Set is_active on every live row in entity_ids; return the number of rows changed."""
        if not entity_ids:
            return 0
        result = await self.db.execute(
            update(self.model)
            .where(
                self.model.id.in_(list(entity_ids)),
                self.model.is_deleted.is_(False),
            )
            .values(
                is_active=is_active,
                updated_at=utc_now(),
                updated_by=get_current_actor_id(),
            )
        )
        count = result.rowcount or 0
        logger.info(
            "%s bulk status: %d rows set is_active=%s",
            self.entity_type,
            count,
            is_active,
        )
        return count

    async def hard_delete(self, entity_id: str) -> bool:
        """Physically delete the row (deleted or not) and its dependents. False if absent."""
        await self._before_hard_delete(entity_id)
        result = await self.db.execute(
            delete(self.model).where(self.model.id == entity_id)
        )
        removed = (result.rowcount or 0) > 0
        if removed:
            self._log(AuditAction.HARD_DELETED, entity_id)
        return removed

    async def _before_hard_delete(self, entity_id: str) -> None:
        """Override to remove dependent rows before the parent row goes."""

    # Hooks

    async def _on_after_create(self, obj: ModelType) -> None:
        self._log(AuditAction.CREATED, obj.id)

    async def _on_after_update(self, obj: ModelType) -> None:
        logger.debug("%s %s %s", self.entity_type, obj.id, AuditAction.UPDATED.value)

    def _log(self, action: AuditAction, entity_id: str) -> None:
        logger.info(
            "%s %s %s by %s",
            self.entity_type,
            entity_id,
            action.value,
            get_current_actor_id() or "system",
        )
