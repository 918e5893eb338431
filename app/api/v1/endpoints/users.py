"""User API: thin routes delegating to UserService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import (
    get_list_query,
    get_user_service,
    get_user_service_for_write,
)
from app.application.dtos.common import ListQuery
from app.application.services import UserService
from app.core.limiter import limit_writes
from app.schemas.common import BulkStatusRequest, BulkStatusResponse
from app.schemas.user import (
    UserCreateRequest,
    UserListResponse,
    UserResponse,
    UserUpdate,
)

router = APIRouter()

ReadService = Annotated[UserService, Depends(get_user_service)]
WriteService = Annotated[UserService, Depends(get_user_service_for_write)]


@router.post("", response_model=UserResponse, status_code=201)
@limit_writes
async def create_user(request: Request, body: UserCreateRequest, service: WriteService):
    """Create a user. 409 if a live user already has the username or email."""
    user = await service.create(body.model_dump())
    return UserResponse.model_validate(user)


@router.get("", response_model=UserListResponse)
async def list_users(
    query: Annotated[ListQuery, Depends(get_list_query)],
    service: ReadService,
):
    """List live users: search, is_active filter, sort and pagination."""
    page = await service.list(query)
    return UserListResponse(
        items=[UserResponse.model_validate(u) for u in page.items],
        total=page.total,
        page=page.page,
        limit=page.limit,
        total_pages=page.total_pages,
    )


@router.get("/active", response_model=list[UserResponse])
async def list_active_users(service: ReadService):
    return [UserResponse.model_validate(u) for u in await service.list_active()]


@router.get("/deleted", response_model=list[UserResponse])
async def list_deleted_users(service: ReadService):
    """Soft-deleted users, most recently deleted first."""
    return [UserResponse.model_validate(u) for u in await service.list_deleted()]


@router.patch("/bulk/status", response_model=BulkStatusResponse)
@limit_writes
async def bulk_update_user_status(
    request: Request, body: BulkStatusRequest, service: WriteService
):
    """Set is_active on many live users. 400 if ids is empty."""
    result = await service.bulk_set_active(body.ids, body.is_active)
    return BulkStatusResponse(success=result.success, updated_count=result.updated_count)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, service: ReadService):
    return UserResponse.model_validate(await service.get(user_id))


@router.patch("/{user_id}", response_model=UserResponse)
@limit_writes
async def update_user(
    request: Request, user_id: str, body: UserUpdate, service: WriteService
):
    """Partial update. A new password is hashed; 409 on a taken username/email."""
    user = await service.update(user_id, body.model_dump(exclude_unset=True))
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=204)
@limit_writes
async def delete_user(request: Request, user_id: str, service: WriteService) -> None:
    """Soft delete."""
    await service.soft_delete(user_id)


@router.delete("/{user_id}/hard", status_code=204)
@limit_writes
async def hard_delete_user(
    request: Request, user_id: str, service: WriteService
) -> None:
    """Permanently delete the user (live or soft-deleted) and its role mappings."""
    await service.hard_delete(user_id)


@router.patch("/{user_id}/activate", response_model=UserResponse)
@limit_writes
async def activate_user(request: Request, user_id: str, service: WriteService):
    return UserResponse.model_validate(await service.activate(user_id))


@router.patch("/{user_id}/deactivate", response_model=UserResponse)
@limit_writes
async def deactivate_user(request: Request, user_id: str, service: WriteService):
    return UserResponse.model_validate(await service.deactivate(user_id))


@router.patch("/{user_id}/restore", response_model=UserResponse)
@limit_writes
async def restore_user(request: Request, user_id: str, service: WriteService):
    """Undo a soft delete. 404 unless deleted; 409 if its username/email was reused."""
    return UserResponse.model_validate(await service.restore(user_id))
