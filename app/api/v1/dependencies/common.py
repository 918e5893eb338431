"""Shared query-parameter dependencies (list filter, sort, pagination)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Query

from app.application.dtos.common import ListQuery
from app.core.config import get_settings
from app.shared.enums import SortOrder


def get_list_query(
    search: Annotated[str | None, Query(max_length=100)] = None,
    is_active: bool | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int | None, Query(ge=1)] = None,
    sort_by: str = "created_at",
    sort_order: Annotated[str, Query(pattern="^(?i:asc|desc)$")] = "desc",
) -> ListQuery:
    """Build a ListQuery from query parameters. limit defaults to DEFAULT_PAGE_SIZE.

    A limit above MAX_PAGE_SIZE and an unknown sort_by are rejected by the
    service with 400.
    """
    return ListQuery(
        search=search or None,
        is_active=is_active,
        page=page,
        limit=limit if limit is not None else get_settings().default_page_size,
        sort_by=sort_by,
        sort_order=SortOrder(sort_order.lower()),
    )
