"""Application services: user and role directories, assignments, authentication."""

from app.application.services.assignment_service import AssignmentService
from app.application.services.auth_service import AuthService
from app.application.services.directory_service import DirectoryService
from app.application.services.role_service import RoleService
from app.application.services.user_service import UserService

__all__ = [
    "AssignmentService",
    "AuthService",
    "DirectoryService",
    "RoleService",
    "UserService",
]
