"""Domain exceptions for the directory application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class DirectoryException(Exception):
    """Base exception for all directory application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DirectoryException):
    """Raised when input validation fails (e.g. empty bulk input, unknown sort field)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(DirectoryException):
    """Raised when authentication fails (e.g. invalid credentials or token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        """Initialize with optional message.

        Args:
            message: Description of the authentication failure.
        """
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(DirectoryException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'user', 'role').
            resource_id: The ID (or composite key) that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ConflictException(DirectoryException):
    """Raised when a write would violate a uniqueness invariant."""


class UserAlreadyExistsException(ConflictException):
    """Raised when a live user already holds the username or email."""

    def __init__(self, field: str | None = None) -> None:
        """Initialize with the conflicting field, when known.

        Args:
            field: 'username' or 'email'; None when only the store reported it.
        """
        if field:
            message = f"A user with this {field} already exists"
        else:
            message = "Username or email already registered"
        super().__init__(
            message,
            "USER_ALREADY_EXISTS",
            {"field": field} if field else {},
        )


class RoleAlreadyExistsException(ConflictException):
    """Raised when a live role already holds the name."""

    def __init__(self, field: str | None = "name") -> None:
        super().__init__(
            "Role with this name already exists",
            "ROLE_ALREADY_EXISTS",
            {"field": field} if field else {},
        )


class DuplicateAssignmentException(ConflictException):
    """Raised when assigning a role that is already assigned (live mapping exists)."""

    def __init__(self, message: str, assignment_type: str, details_extra: dict[str, Any] | None = None) -> None:
        """Initialize with message and assignment context.

        Args:
            message: Human-readable description (e.g. 'User already has this role assigned').
            assignment_type: Kind of link, e.g. 'user_role'.
            details_extra: Optional extra keys (e.g. user_id, role_id).
        """
        details = details_extra or {}
        details["assignment_type"] = assignment_type
        super().__init__(message, "DUPLICATE_ASSIGNMENT", details)


class SqlNotConfiguredException(DirectoryException):
    """Raised when an operation requires the database but it is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
