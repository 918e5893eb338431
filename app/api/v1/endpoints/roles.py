"""Roles API: create, list, get, update, lifecycle and bulk status."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import (
    get_list_query,
    get_role_service,
    get_role_service_for_write,
)
from app.application.dtos.common import ListQuery
from app.application.services import RoleService
from app.core.limiter import limit_writes
from app.schemas.common import BulkStatusRequest, BulkStatusResponse
from app.schemas.role import (
    RoleCreateRequest,
    RoleListResponse,
    RoleResponse,
    RoleUpdate,
)

router = APIRouter()

ReadService = Annotated[RoleService, Depends(get_role_service)]
WriteService = Annotated[RoleService, Depends(get_role_service_for_write)]


@router.post("", response_model=RoleResponse, status_code=201)
@limit_writes
async def create_role(request: Request, body: RoleCreateRequest, service: WriteService):
    """Create a role. 409 if a live role already has the name."""
    return RoleResponse.model_validate(await service.create(body.model_dump()))


@router.get("", response_model=RoleListResponse)
async def list_roles(
    query: Annotated[ListQuery, Depends(get_list_query)],
    service: ReadService,
):
    """List live roles (paginated)."""
    page = await service.list(query)
    return RoleListResponse(
        items=[RoleResponse.model_validate(r) for r in page.items],
        total=page.total,
        page=page.page,
        limit=page.limit,
        total_pages=page.total_pages,
    )


@router.get("/active", response_model=list[RoleResponse])
async def list_active_roles(service: ReadService):
    return [RoleResponse.model_validate(r) for r in await service.list_active()]


@router.get("/deleted", response_model=list[RoleResponse])
async def list_deleted_roles(service: ReadService):
    return [RoleResponse.model_validate(r) for r in await service.list_deleted()]


@router.patch("/bulk/status", response_model=BulkStatusResponse)
@limit_writes
async def bulk_update_role_status(
    request: Request, body: BulkStatusRequest, service: WriteService
):
    result = await service.bulk_set_active(body.ids, body.is_active)
    return BulkStatusResponse(success=result.success, updated_count=result.updated_count)


@router.get("/{role_id}", response_model=RoleResponse)
async def get_role(role_id: str, service: ReadService):
    """Get role by id (live only)."""
    return RoleResponse.model_validate(await service.get(role_id))


@router.patch("/{role_id}", response_model=RoleResponse)
@limit_writes
async def update_role(
    request: Request, role_id: str, body: RoleUpdate, service: WriteService
):
    role = await service.update(role_id, body.model_dump(exclude_unset=True))
    return RoleResponse.model_validate(role)


@router.delete("/{role_id}", status_code=204)
@limit_writes
async def delete_role(request: Request, role_id: str, service: WriteService) -> None:
    await service.soft_delete(role_id)


@router.delete("/{role_id}/hard", status_code=204)
@limit_writes
async def hard_delete_role(
    request: Request, role_id: str, service: WriteService
) -> None:
    """Permanently delete the role and every mapping that references it."""
    await service.hard_delete(role_id)


@router.patch("/{role_id}/activate", response_model=RoleResponse)
@limit_writes
async def activate_role(request: Request, role_id: str, service: WriteService):
    return RoleResponse.model_validate(await service.activate(role_id))


@router.patch("/{role_id}/deactivate", response_model=RoleResponse)
@limit_writes
async def deactivate_role(request: Request, role_id: str, service: WriteService):
    return RoleResponse.model_validate(await service.deactivate(role_id))


@router.patch("/{role_id}/restore", response_model=RoleResponse)
@limit_writes
async def restore_role(request: Request, role_id: str, service: WriteService):
    return RoleResponse.model_validate(await service.restore(role_id))
