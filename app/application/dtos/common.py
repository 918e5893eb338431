"""DTOs shared by the directory use cases: list query, page, bulk results."""

from dataclasses import dataclass, field
from math import ceil
from typing import Generic, TypeVar

from app.shared.enums import SortOrder

T = TypeVar("T")


@dataclass(frozen=True)
class ListQuery:
    """Filter, sort and pagination for directory list operations.

    page is 1-based. Live (non-deleted) rows only; search is OR-ed across
    the entity's search fields.
    """

    search: str | None = None
    is_active: bool | None = None
    page: int = 1
    limit: int = 10
    sort_by: str = "created_at"
    sort_order: SortOrder = SortOrder.DESC

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of results plus the pre-pagination total."""

    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10

    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.limit) if self.limit else 0


@dataclass(frozen=True)
class BulkStatusResult:
    """Result of bulk_set_active: rows actually modified."""

    success: bool
    updated_count: int


@dataclass(frozen=True)
class BulkAssignResult:
    """Result of bulk_assign: newly created mappings."""

    success: bool
    assigned_count: int


@dataclass(frozen=True)
class BulkUnassignResult:
    """Result of bulk_unassign: mappings soft-deleted."""

    success: bool
    removed_count: int
