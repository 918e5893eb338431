"""User-role assignments against SQLite: uniqueness, bulk operations, cascades."""

from sqlalchemy import func, select

import pytest

from app.domain.exceptions import (
    DuplicateAssignmentException,
    ResourceNotFoundException,
    ValidationException,
)
from app.infrastructure.persistence.models import UserRoleMapping
from tests.helpers import user_payload


@pytest.fixture
async def user(user_service):
    return await user_service.create(user_payload(1))


@pytest.fixture
async def roles(role_service):
    return [await role_service.create({"name": name}) for name in ("Admin", "Editor", "Viewer")]


async def _mapping_rows(db_session, user_id: str) -> int:
    stmt = select(func.count()).select_from(UserRoleMapping).where(
        UserRoleMapping.user_id == user_id
    )
    return (await db_session.execute(stmt)).scalar_one()


async def test_assign_returns_names(assignment_service, user, roles) -> None:
    result = await assignment_service.assign(user.id, roles[0].id)
    assert result.user_id == user.id
    assert result.role_id == roles[0].id
    assert result.role_name == "Admin"
    assert result.username == "user1"
    assert result.is_active is True


async def test_assign_inactive(assignment_service, user, roles) -> None:
    result = await assignment_service.assign(user.id, roles[0].id, is_active=False)
    assert result.is_active is False


async def test_assign_twice_conflicts_then_reassign_after_unassign(
    assignment_service, user, roles
) -> None:
    await assignment_service.assign(user.id, roles[0].id)
    with pytest.raises(DuplicateAssignmentException):
        await assignment_service.assign(user.id, roles[0].id)

    await assignment_service.unassign(user.id, roles[0].id)
    assert await assignment_service.list_for_user(user.id) == []

    again = await assignment_service.assign(user.id, roles[0].id)
    assert [m.id for m in await assignment_service.list_for_user(user.id)] == [again.id]


async def test_assign_requires_live_user_and_role(
    assignment_service, user_service, role_service, user, roles
) -> None:
    await role_service.soft_delete(roles[0].id)
    with pytest.raises(ResourceNotFoundException):
        await assignment_service.assign(user.id, roles[0].id)

    await user_service.soft_delete(user.id)
    with pytest.raises(ResourceNotFoundException):
        await assignment_service.assign(user.id, roles[1].id)


async def test_list_for_role(assignment_service, user_service, user, roles) -> None:
    other = await user_service.create(user_payload(2))
    await assignment_service.assign(user.id, roles[0].id)
    await assignment_service.assign(other.id, roles[0].id)
    await assignment_service.assign(other.id, roles[1].id)

    listed = await assignment_service.list_for_role(roles[0].id)
    assert sorted(m.username for m in listed) == ["user1", "user2"]


async def test_list_for_missing_anchor_is_not_found(assignment_service) -> None:
    with pytest.raises(ResourceNotFoundException):
        await assignment_service.list_for_user("missing")
    with pytest.raises(ResourceNotFoundException):
        await assignment_service.list_for_role("missing")


async def test_set_status(assignment_service, user, roles) -> None:
    await assignment_service.assign(user.id, roles[0].id)
    result = await assignment_service.set_status(user.id, roles[0].id, False)
    assert result.is_active is False
    # Inactive assignments are still listed.
    listed = await assignment_service.list_for_user(user.id)
    assert [m.is_active for m in listed] == [False]


async def test_set_status_without_assignment_is_not_found(
    assignment_service, user, roles
) -> None:
    with pytest.raises(ResourceNotFoundException):
        await assignment_service.set_status(user.id, roles[0].id, True)


async def test_bulk_assign_skips_existing(assignment_service, db_session, user, roles) -> None:
    await assignment_service.assign(user.id, roles[0].id)
    result = await assignment_service.bulk_assign(user.id, [roles[0].id, roles[1].id])

    assert result.success is True
    assert result.assigned_count == 1
    assert await _mapping_rows(db_session, user.id) == 2
    assert sorted(m.role_name for m in await assignment_service.list_for_user(user.id)) == [
        "Admin",
        "Editor",
    ]


async def test_bulk_assign_with_unknown_role_assigns_nothing(
    assignment_service, db_session, user, roles
) -> None:
    with pytest.raises(ResourceNotFoundException):
        await assignment_service.bulk_assign(user.id, [roles[0].id, "missing"])
    assert await _mapping_rows(db_session, user.id) == 0


async def test_bulk_assign_empty_is_bad_request(assignment_service, user) -> None:
    with pytest.raises(ValidationException):
        await assignment_service.bulk_assign(user.id, [])


async def test_bulk_unassign(assignment_service, user, roles) -> None:
    await assignment_service.bulk_assign(user.id, [r.id for r in roles])
    result = await assignment_service.bulk_unassign(
        user.id, [roles[0].id, roles[1].id, "missing"]
    )
    assert result.removed_count == 2
    assert [m.role_name for m in await assignment_service.list_for_user(user.id)] == [
        "Viewer"
    ]


async def test_hard_delete_user_removes_mappings(
    assignment_service, user_service, db_session, user, roles
) -> None:
    await assignment_service.bulk_assign(user.id, [r.id for r in roles])
    await user_service.hard_delete(user.id)

    assert await _mapping_rows(db_session, user.id) == 0
    with pytest.raises(ResourceNotFoundException):
        await assignment_service.list_for_user(user.id)


async def test_hard_delete_role_removes_mappings(
    assignment_service, role_service, user, roles
) -> None:
    await assignment_service.assign(user.id, roles[0].id)
    await assignment_service.assign(user.id, roles[1].id)
    await role_service.hard_delete(roles[0].id)

    assert [m.role_name for m in await assignment_service.list_for_user(user.id)] == [
        "Editor"
    ]


async def test_soft_deleted_mapping_history_survives_reassign(
    assignment_service, db_session, user, roles
) -> None:
    await assignment_service.assign(user.id, roles[0].id)
    await assignment_service.unassign(user.id, roles[0].id)
    await assignment_service.assign(user.id, roles[0].id)
    assert await _mapping_rows(db_session, user.id) == 2
