"""Role API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import PageMeta


class RoleCreateRequest(BaseModel):
    """Request body for creating a role."""

    name: str = Field(..., min_length=2, max_length=50)
    is_active: bool | None = None


class RoleUpdate(BaseModel):
    """Request body for updating a role (partial)."""

    name: str | None = Field(default=None, min_length=2, max_length=50)
    is_active: bool | None = None


class RoleResponse(BaseModel):
    """Role list/detail response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    is_active: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime
    created_by: str | None
    updated_by: str | None


class RoleListResponse(PageMeta):
    items: list[RoleResponse]
