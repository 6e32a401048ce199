"""Ambient request context for interceptors.

An HTTP adapter (or any caller) sets the current context for the thread
handling a request; the correlation and metadata interceptors read it when
a message is formatted.

    RequestContext(path="/users", method="POST", correlation_id=rid).set_current()
    ...
    RequestContext.clear_current()
"""

import threading
import uuid
from dataclasses import dataclass
from typing import Any, Optional

_context = threading.local()


def generate_correlation_id() -> str:
    """Generate a random correlation ID."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class RequestContext:
    """Request fields available while a message is being formatted."""

    path: Optional[str] = None
    method: Optional[str] = None
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None
    user_id: Optional[str] = None
    user_name: Optional[str] = None
    correlation_id: Optional[str] = None

    def set_current(self) -> None:
        """Set this context as current for the thread."""
        _context.current = self

    @classmethod
    def get_current(cls) -> Optional["RequestContext"]:
        """Get the current context for this thread, or None if not set."""
        return getattr(_context, "current", None)

    @classmethod
    def clear_current(cls) -> None:
        if hasattr(_context, "current"):
            delattr(_context, "current")

    def as_fields(self) -> dict[str, Any]:
        """Return the context as a plain key/value mapping."""
        return {
            "path": self.path,
            "method": self.method,
            "user_agent": self.user_agent,
            "ip_address": self.ip_address,
            "user_id": self.user_id,
            "user_name": self.user_name,
            "correlation_id": self.correlation_id,
        }


def current_request_fields() -> dict[str, Any] | None:
    """Context provider reading the thread's RequestContext."""
    ctx = RequestContext.get_current()
    return ctx.as_fields() if ctx is not None else None
