"""Ordered interceptor pipeline shared by all formatters.

Before and after hooks are folded in registration order: each interceptor
receives the previous one's output. A failing interceptor is logged and
skipped so one misbehaving concern cannot block message delivery.
"""

import logging
import threading

from msg_catalog.interceptors.base import BaseInterceptor
from msg_catalog.message_model import Message

logger = logging.getLogger(__name__)


class InterceptorPipeline:
    """Thread-safe, append-only (until cleared) list of interceptors."""

    def __init__(self, interceptors: list[BaseInterceptor] | None = None) -> None:
        self._lock = threading.Lock()
        self._interceptors: list[BaseInterceptor] = list(interceptors or [])

    def register(self, interceptor: BaseInterceptor) -> None:
        """Append an interceptor; it runs after those already registered."""
        if interceptor is None:
            raise TypeError("interceptor must not be None")
        with self._lock:
            self._interceptors.append(interceptor)

    def clear(self) -> None:
        """Remove every interceptor."""
        with self._lock:
            self._interceptors.clear()

    @property
    def interceptors(self) -> tuple[BaseInterceptor, ...]:
        with self._lock:
            return tuple(self._interceptors)

    def __len__(self) -> int:
        with self._lock:
            return len(self._interceptors)

    def run_before(self, message: Message) -> Message:
        """Fold on_before_format over the registered interceptors."""
        return self._fold(message, "on_before_format")

    def run_after(self, message: Message) -> Message:
        """Fold on_after_format over the registered interceptors."""
        return self._fold(message, "on_after_format")

    def _fold(self, message: Message, hook: str) -> Message:
        result = message
        for interceptor in self.interceptors:
            name = type(interceptor).__name__
            try:
                candidate = getattr(interceptor, hook)(result)
            except Exception:
                logger.warning("Interceptor %s failed in %s for %s; skipping", name, hook, result.code, exc_info=True)
                continue
            if not isinstance(candidate, Message):
                logger.warning(
                    "Interceptor %s returned %s from %s instead of a Message; skipping",
                    name,
                    type(candidate).__name__,
                    hook,
                )
                continue
            result = candidate
        return result


_default_pipeline = InterceptorPipeline()


def default_pipeline() -> InterceptorPipeline:
    """Return the process-wide pipeline used by formatters created without one."""
    return _default_pipeline
