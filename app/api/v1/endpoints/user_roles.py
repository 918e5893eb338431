"""User-role assignment API: assign, list by user or role, unassign, status, bulk."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import (
    get_assignment_service,
    get_assignment_service_for_write,
)
from app.application.services import AssignmentService
from app.core.limiter import limit_writes
from app.schemas.user_role import (
    AssignmentStatusRequest,
    AssignRoleRequest,
    BulkAssignResponse,
    BulkRoleIdsRequest,
    BulkUnassignResponse,
    UserRoleResponse,
)

router = APIRouter()

ReadService = Annotated[AssignmentService, Depends(get_assignment_service)]
WriteService = Annotated[AssignmentService, Depends(get_assignment_service_for_write)]


@router.post("/users/{user_id}/roles", response_model=UserRoleResponse, status_code=201)
@limit_writes
async def assign_role(
    request: Request, user_id: str, body: AssignRoleRequest, service: WriteService
):
    """Assign a role to a user. 404 if either is missing; 409 if already assigned."""
    mapping = await service.assign(user_id, body.role_id, is_active=body.is_active)
    return UserRoleResponse.model_validate(mapping)


@router.get("/users/{user_id}/roles", response_model=list[UserRoleResponse])
async def list_user_roles(user_id: str, service: ReadService):
    return [
        UserRoleResponse.model_validate(m) for m in await service.list_for_user(user_id)
    ]


@router.get("/roles/{role_id}/users", response_model=list[UserRoleResponse])
async def list_role_users(role_id: str, service: ReadService):
    return [
        UserRoleResponse.model_validate(m) for m in await service.list_for_role(role_id)
    ]


@router.post("/users/{user_id}/roles/bulk", response_model=BulkAssignResponse)
@limit_writes
async def bulk_assign_roles(
    request: Request, user_id: str, body: BulkRoleIdsRequest, service: WriteService
):
    """Assign many roles; already-assigned ones are skipped. All role ids must exist."""
    result = await service.bulk_assign(user_id, body.role_ids)
    return BulkAssignResponse(success=result.success, assigned_count=result.assigned_count)


# Declared before /{role_id} so "bulk" is not taken as a role id.
@router.delete("/users/{user_id}/roles/bulk", response_model=BulkUnassignResponse)
@limit_writes
async def bulk_unassign_roles(
    request: Request, user_id: str, body: BulkRoleIdsRequest, service: WriteService
):
    result = await service.bulk_unassign(user_id, body.role_ids)
    return BulkUnassignResponse(success=result.success, removed_count=result.removed_count)


@router.delete("/users/{user_id}/roles/{role_id}", status_code=204)
@limit_writes
async def unassign_role(
    request: Request, user_id: str, role_id: str, service: WriteService
) -> None:
    """Soft-delete the live mapping for the pair."""
    await service.unassign(user_id, role_id)


@router.patch(
    "/users/{user_id}/roles/{role_id}/status", response_model=UserRoleResponse
)
@limit_writes
async def set_assignment_status(
    request: Request,
    user_id: str,
    role_id: str,
    body: AssignmentStatusRequest,
    service: WriteService,
):
    mapping = await service.set_status(user_id, role_id, body.is_active)
    return UserRoleResponse.model_validate(mapping)
