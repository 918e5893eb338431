"""Domain layer: exceptions shared by application and infrastructure.

No dependencies on infrastructure or presentation.
"""

from app.domain.exceptions import (
    AuthenticationException,
    ConflictException,
    DirectoryException,
    DuplicateAssignmentException,
    ResourceNotFoundException,
    RoleAlreadyExistsException,
    SqlNotConfiguredException,
    UserAlreadyExistsException,
    ValidationException,
)

__all__ = [
    "AuthenticationException",
    "ConflictException",
    "DirectoryException",
    "DuplicateAssignmentException",
    "ResourceNotFoundException",
    "RoleAlreadyExistsException",
    "SqlNotConfiguredException",
    "UserAlreadyExistsException",
    "ValidationException",
]
