"""Role directory against SQLite."""

import pytest
from sqlalchemy import select

from app.application.dtos.common import ListQuery
from app.domain.exceptions import (
    ResourceNotFoundException,
    RoleAlreadyExistsException,
    ValidationException,
)
from app.infrastructure.persistence.models import Role
from app.shared.enums import SortOrder


async def test_create_and_get(role_service) -> None:
    created = await role_service.create({"name": "Admin"})
    found = await role_service.get(created.id)
    assert found.name == "Admin"
    assert found.is_active is True


async def test_duplicate_live_name_conflicts(role_service) -> None:
    await role_service.create({"name": "Admin"})
    with pytest.raises(RoleAlreadyExistsException):
        await role_service.create({"name": "Admin"})


async def test_name_is_case_sensitive_for_uniqueness(role_service) -> None:
    await role_service.create({"name": "Admin"})
    other = await role_service.create({"name": "admin"})
    assert other.name == "admin"


async def test_name_reusable_after_soft_delete(role_service) -> None:
    first = await role_service.create({"name": "Admin"})
    await role_service.soft_delete(first.id)
    second = await role_service.create({"name": "Admin"})

    with pytest.raises(RoleAlreadyExistsException):
        await role_service.restore(first.id)
    assert (await role_service.get(second.id)).name == "Admin"


async def test_update_rename_and_status(role_service) -> None:
    created = await role_service.create({"name": "Editor"})
    updated = await role_service.update(created.id, {"name": "Writer", "is_active": False})
    assert updated.name == "Writer"
    assert updated.is_active is False


async def test_update_deleted_role_is_not_found(role_service) -> None:
    created = await role_service.create({"name": "Editor"})
    await role_service.soft_delete(created.id)
    with pytest.raises(ResourceNotFoundException):
        await role_service.update(created.id, {"name": "Writer"})


async def test_list_search_and_sort(role_service) -> None:
    for name in ("Viewer", "Admin", "Auditor", "Editor"):
        await role_service.create({"name": name})

    page = await role_service.list(
        ListQuery(search="A", sort_by="name", sort_order=SortOrder.ASC)
    )
    assert [r.name for r in page.items] == ["Admin", "Auditor"]
    assert page.total == 2


async def test_list_limit_above_max_is_rejected(role_repo) -> None:
    from app.application.services import RoleService

    service = RoleService(role_repo, max_page_size=5)
    with pytest.raises(ValidationException):
        await service.list(ListQuery(limit=6))


async def test_bulk_status_counts_only_live_rows(role_service) -> None:
    a = await role_service.create({"name": "A1"})
    b = await role_service.create({"name": "B1"})
    result = await role_service.bulk_set_active([a.id, b.id, a.id, "missing"], False)
    assert result.updated_count == 2
    assert [r.id for r in await role_service.list_active()] == []


async def test_hard_delete_live_role(role_service, db_session) -> None:
    created = await role_service.create({"name": "Temp"})
    await role_service.hard_delete(created.id)
    remaining = await db_session.execute(select(Role.id).where(Role.id == created.id))
    assert remaining.first() is None
