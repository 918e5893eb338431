"""DTOs for role use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RoleResult:
    """Role read-model (result of get, list, create, etc.)."""

    id: str
    name: str
    is_active: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime
    created_by: str | None
    updated_by: str | None
