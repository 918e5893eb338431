"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.mixins import (
    ActiveFlagMixin,
    CuidMixin,
    DirectoryModel,
    SoftDeleteMixin,
    TimestampMixin,
    UserAuditMixin,
)
from app.infrastructure.persistence.models.role import Role
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.models.user_role import UserRoleMapping

__all__ = [
    "User",
    "Role",
    "UserRoleMapping",
    "ActiveFlagMixin",
    "CuidMixin",
    "DirectoryModel",
    "SoftDeleteMixin",
    "TimestampMixin",
    "UserAuditMixin",
]
