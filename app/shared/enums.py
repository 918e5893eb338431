"""Shared enumerations for the directory application.

Cross-cutting enums used by application and infrastructure (audit action,
sort order).
"""

from enum import Enum


class AuditAction(str, Enum):
    """Mutation kinds written to the application log."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    HARD_DELETED = "hard_deleted"
    RESTORED = "restored"
    ACTIVATED = "activated"
    DEACTIVATED = "deactivated"
    STATUS_CHANGED = "status_changed"
    ASSIGNED = "assigned"
    UNASSIGNED = "unassigned"


class SortOrder(str, Enum):
    """Sort direction for list queries."""

    ASC = "asc"
    DESC = "desc"
