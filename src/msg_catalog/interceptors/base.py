"""Base interceptor interface.

Interceptors run around every formatter call: on_before_format may return
an enriched copy of the message that is then rendered; on_after_format sees
the same (pre-rendering) message once rendering is done.
"""

from abc import ABC, abstractmethod

from msg_catalog.message_model import Message


class BaseInterceptor(ABC):
    """Abstract base for cross-cutting message transformations.

    Both hooks must return a Message and must not mutate the one they
    receive; use the with_* builders to derive a copy. Raising is allowed:
    the pipeline logs the failure and carries on with the previous message.
    """

    @abstractmethod
    def on_before_format(self, message: Message) -> Message:
        """Transform the message before it is rendered."""
        pass

    def on_after_format(self, message: Message) -> Message:
        """Observe the message after it was rendered. Defaults to a no-op."""
        return message
