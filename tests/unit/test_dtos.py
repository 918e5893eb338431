"""ListQuery offset and PageResult.total_pages."""

import pytest

from app.application.dtos.common import ListQuery, PageResult


@pytest.mark.parametrize(
    ("page", "limit", "offset"), [(1, 10, 0), (2, 10, 10), (3, 25, 50)]
)
def test_list_query_offset(page: int, limit: int, offset: int) -> None:
    assert ListQuery(page=page, limit=limit).offset == offset


@pytest.mark.parametrize(
    ("total", "limit", "pages"), [(0, 10, 0), (10, 10, 1), (15, 10, 2), (101, 100, 2)]
)
def test_page_result_total_pages(total: int, limit: int, pages: int) -> None:
    assert PageResult(items=[], total=total, page=1, limit=limit).total_pages == pages
