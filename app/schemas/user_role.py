"""User-role assignment API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AssignRoleRequest(BaseModel):
    """Request body for POST /users/{user_id}/roles."""

    role_id: str = Field(..., min_length=1)
    is_active: bool = True


class AssignmentStatusRequest(BaseModel):
    """Request body for PATCH /users/{user_id}/roles/{role_id}/status."""

    is_active: bool


class BulkRoleIdsRequest(BaseModel):
    """Request body for bulk assign/unassign. An empty list is rejected with 400."""

    role_ids: list[str] = Field(..., max_length=1000)


class UserRoleResponse(BaseModel):
    """Assignment response with role name and username."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    role_id: str
    role_name: str
    username: str
    is_active: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime
    created_by: str | None
    updated_by: str | None


class BulkAssignResponse(BaseModel):
    success: bool
    assigned_count: int


class BulkUnassignResponse(BaseModel):
    success: bool
    removed_count: int
