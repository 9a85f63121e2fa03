"""Request-scoped context variables used for log correlation."""

from contextvars import ContextVar
from typing import Optional

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
user_id_var: ContextVar[Optional[str]] = ContextVar("user_id", default=None)


def set_request_id(request_id: str | None) -> None:
    """Set the current request ID."""
    request_id_var.set(request_id)


def get_request_id() -> str | None:
    """Get the current request ID."""
    return request_id_var.get()


def set_user_context(user_id: str | None) -> None:
    """Set the authenticated user for the current request.

    Args:
        user_id: User ID (token subject) to set in context
    """
    user_id_var.set(user_id)


def get_user_context() -> str | None:
    """Get the authenticated user for the current request."""
    return user_id_var.get()


def clear_request_context() -> None:
    """Clear all request context values."""
    request_id_var.set(None)
    user_id_var.set(None)
