"""Fill in a missing correlation id from the calling context."""

from collections.abc import Callable

from msg_catalog.context import RequestContext, generate_correlation_id
from msg_catalog.interceptors.base import BaseInterceptor
from msg_catalog.message_model import Message


def current_correlation_id() -> str | None:
    ctx = RequestContext.get_current()
    return ctx.correlation_id if ctx is not None else None


class CorrelationIdInterceptor(BaseInterceptor):
    """Sets correlation_id from provider() when the message has none.

    With generate_missing, a message that still has no id after the
    provider gets a fresh random one.
    """

    def __init__(
        self,
        provider: Callable[[], str | None] | None = None,
        generate_missing: bool = False,
    ) -> None:
        self.provider = provider or current_correlation_id
        self.generate_missing = generate_missing

    def on_before_format(self, message: Message) -> Message:
        if message.correlation_id:
            return message
        correlation_id = self.provider()
        if not correlation_id and self.generate_missing:
            correlation_id = generate_correlation_id()
        if not correlation_id:
            return message
        return message.with_correlation_id(correlation_id)
