"""Pydantic request/response schemas for the API."""

from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from app.schemas.common import BulkStatusRequest, BulkStatusResponse, PageMeta
from app.schemas.health import HealthResponse
from app.schemas.role import (
    RoleCreateRequest,
    RoleListResponse,
    RoleResponse,
    RoleUpdate,
)
from app.schemas.user import (
    UserCreateRequest,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from app.schemas.user_role import (
    AssignmentStatusRequest,
    AssignRoleRequest,
    BulkAssignResponse,
    BulkRoleIdsRequest,
    BulkUnassignResponse,
    UserRoleResponse,
)

__all__ = [
    "AssignRoleRequest",
    "AssignmentStatusRequest",
    "BulkAssignResponse",
    "BulkRoleIdsRequest",
    "BulkStatusRequest",
    "BulkStatusResponse",
    "BulkUnassignResponse",
    "HealthResponse",
    "LoginRequest",
    "PageMeta",
    "RegisterRequest",
    "RoleCreateRequest",
    "RoleListResponse",
    "RoleResponse",
    "RoleUpdate",
    "TokenResponse",
    "UserCreateRequest",
    "UserListResponse",
    "UserResponse",
    "UserUpdate",
]
