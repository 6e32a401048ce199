"""Emit every formatted message through a logger."""

import logging

from msg_catalog.interceptors.base import BaseInterceptor
from msg_catalog.message_model import Message
from msg_catalog.templates import MessageType

LOG_LEVELS = {
    MessageType.SUCCESS: logging.INFO,
    MessageType.INFO: logging.INFO,
    MessageType.WARNING: logging.WARNING,
    MessageType.ERROR: logging.ERROR,
    MessageType.CRITICAL: logging.CRITICAL,
}


def log_level_for(message_type: MessageType) -> int:
    return LOG_LEVELS.get(message_type, logging.INFO)


class LoggingInterceptor(BaseInterceptor):
    """Logs each message before it is rendered, at a level derived from its type.

    Messages below minimum_level are not logged. The code, title,
    description and correlation id are attached as structured fields via
    the record's extra.
    """

    def __init__(self, logger: logging.Logger | None = None, minimum_level: int = logging.WARNING) -> None:
        self.logger = logger or logging.getLogger("msg_catalog.messages")
        self.minimum_level = minimum_level

    def on_before_format(self, message: Message) -> Message:
        level = log_level_for(message.type)
        if level < self.minimum_level:
            return message

        fields = {
            "message_code": message.code,
            "message_title": message.title,
            "message_description": message.description,
        }
        if message.correlation_id:
            fields["correlation_id"] = message.correlation_id

        self.logger.log(
            level,
            "[%s] %s: %s",
            message.code,
            message.title,
            message.description,
            extra=fields,
        )
        return message
