"""Single-line log formatter."""

from typing import Any

from msg_catalog.formatters.base import BaseFormatter
from msg_catalog.message_model import Message


class LogFormatter(BaseFormatter):
    """Formats as '[2025-11-16 10:47:19.000] [Info] Title'."""

    def _format_core(self, message: Message) -> str:
        stamp = message.timestamp.strftime("%Y-%m-%d %H:%M:%S.") + f"{message.timestamp.microsecond // 1000:03d}"
        return f"[{stamp}] [{message.type.label}] {message.title}"

    def _to_object(self, message: Message) -> dict[str, Any]:
        record: dict[str, Any] = {
            "timestamp": message.timestamp.isoformat(),
            "type": message.type.label,
            "code": message.code,
            "message": message.title,
            "description": message.description,
        }
        if message.correlation_id:
            record["correlationId"] = message.correlation_id
        return record
