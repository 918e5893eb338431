"""User API schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.schemas.common import PageMeta


class UserCreateRequest(BaseModel):
    """Request body for creating a user."""

    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str | None = Field(default=None, max_length=50)
    date_of_birth: date | None = None
    is_active: bool | None = None


class UserUpdate(BaseModel):
    """Request body for PATCH /users/{id} (partial). last_name and date_of_birth may be cleared with null."""

    username: str | None = Field(default=None, min_length=3, max_length=50)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=6, max_length=128)
    first_name: str | None = Field(default=None, min_length=2, max_length=50)
    last_name: str | None = Field(default=None, max_length=50)
    date_of_birth: date | None = None
    is_active: bool | None = None


class UserResponse(BaseModel):
    """User response (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    first_name: str
    last_name: str | None
    date_of_birth: date | None
    is_active: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime
    created_by: str | None
    updated_by: str | None


class UserListResponse(PageMeta):
    items: list[UserResponse]
