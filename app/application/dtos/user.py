"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class UserResult:
    """User read-model (projection). No password hash."""

    id: str
    username: str
    email: str
    first_name: str
    last_name: str | None
    date_of_birth: date | None
    is_active: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime
    created_by: str | None
    updated_by: str | None
