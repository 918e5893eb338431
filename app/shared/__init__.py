"""Shared utilities: request context, enums, logging, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.context import (
    clear_current_user,
    get_current_actor_id,
    get_request_id,
    set_current_user,
)
from app.shared.enums import AuditAction, SortOrder
from app.shared.utils import ensure_utc, generate_cuid, utc_now

__all__ = [
    "set_current_user",
    "clear_current_user",
    "get_current_actor_id",
    "get_request_id",
    "AuditAction",
    "SortOrder",
    "generate_cuid",
    "utc_now",
    "ensure_utc",
]
