"""Application DTOs (no ORM dependency)."""

from app.application.dtos.auth import LoginResult
from app.application.dtos.common import (
    BulkAssignResult,
    BulkStatusResult,
    BulkUnassignResult,
    ListQuery,
    PageResult,
)
from app.application.dtos.role import RoleResult
from app.application.dtos.user import UserResult
from app.application.dtos.user_role import UserRoleResult

__all__ = [
    "BulkAssignResult",
    "BulkStatusResult",
    "BulkUnassignResult",
    "LoginResult",
    "ListQuery",
    "PageResult",
    "RoleResult",
    "UserResult",
    "UserRoleResult",
]
