"""DTOs for user-role assignment use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserRoleResult:
    """Assignment read-model with both sides' display names denormalized."""

    id: str
    user_id: str
    role_id: str
    role_name: str
    username: str
    is_active: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime
    created_by: str | None
    updated_by: str | None
