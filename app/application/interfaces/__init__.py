"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure.
"""

from app.application.interfaces.repositories import (
    IDirectoryRepository,
    IUserRepository,
    IUserRoleRepository,
)
from app.application.interfaces.services import IPasswordHasher, ITokenIssuer

__all__ = [
    "IDirectoryRepository",
    "IPasswordHasher",
    "ITokenIssuer",
    "IUserRepository",
    "IUserRoleRepository",
]
