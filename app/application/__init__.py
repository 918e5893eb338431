"""Application layer: interfaces, DTOs, services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, hashing, tokens).
"""

from app.application.interfaces import (
    IDirectoryRepository,
    IPasswordHasher,
    ITokenIssuer,
    IUserRepository,
    IUserRoleRepository,
)
from app.application.services import (
    AssignmentService,
    AuthService,
    DirectoryService,
    RoleService,
    UserService,
)

__all__ = [
    "AssignmentService",
    "AuthService",
    "DirectoryService",
    "IDirectoryRepository",
    "IPasswordHasher",
    "ITokenIssuer",
    "IUserRepository",
    "IUserRoleRepository",
    "RoleService",
    "UserService",
]
