"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the request actor, list query
parameters and application services. Routes depend only on these, not on
infrastructure directly.
"""

from app.api.v1.dependencies.auth import (
    get_current_user_id,
    get_current_user_id_optional,
    get_password_hasher,
    get_token_issuer,
)
from app.api.v1.dependencies.common import get_list_query
from app.api.v1.dependencies.db import ReadSession, WriteSession
from app.api.v1.dependencies.directory import (
    get_assignment_service,
    get_assignment_service_for_write,
    get_auth_service,
    get_auth_service_for_write,
    get_role_service,
    get_role_service_for_write,
    get_user_service,
    get_user_service_for_write,
)

__all__ = [
    "ReadSession",
    "WriteSession",
    "get_assignment_service",
    "get_assignment_service_for_write",
    "get_auth_service",
    "get_auth_service_for_write",
    "get_current_user_id",
    "get_current_user_id_optional",
    "get_list_query",
    "get_password_hasher",
    "get_role_service",
    "get_role_service_for_write",
    "get_token_issuer",
    "get_user_service",
    "get_user_service_for_write",
]
