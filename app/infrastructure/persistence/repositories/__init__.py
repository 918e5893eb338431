"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.directory_repo import (
    DirectoryRepository,
)
from app.infrastructure.persistence.repositories.role_repo import RoleRepository
from app.infrastructure.persistence.repositories.user_repo import UserRepository
from app.infrastructure.persistence.repositories.user_role_repo import (
    UserRoleRepository,
)

__all__ = [
    "BaseRepository",
    "DirectoryRepository",
    "RoleRepository",
    "UserRepository",
    "UserRoleRepository",
]
