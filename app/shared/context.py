"""Request context management using contextvars.

Provides async-safe storage for request-scoped data: the current actor
(repositories read it to stamp created_by/updated_by) and the request id
(the logging filter reads it).

Usage:
    set_current_user("user123")
    user_id = get_current_actor_id()
"""

from contextvars import ContextVar, Token

_current_user_id: ContextVar[str | None] = ContextVar("current_user_id", default=None)


def set_current_user(user_id: str) -> None:
    """Set the authenticated user as the actor for this request.

    Call in a dependency after authentication. Context is scoped to the
    current async task.

    Raises:
        ValueError: If user_id is empty.
    """
    if not user_id:
        raise ValueError("user_id is required")
    _current_user_id.set(user_id)


def clear_current_user() -> None:
    """Clear the current actor; writes are then stamped as anonymous (None)."""
    _current_user_id.set(None)


def get_current_actor_id() -> str | None:
    """Return the current user ID, or None if not authenticated."""
    return _current_user_id.get()


_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str | None) -> Token[str | None]:
    """Bind the request id for log records; returns a token for reset_request_id."""
    return _request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    _request_id.reset(token)


def get_request_id() -> str | None:
    return _request_id.get()
