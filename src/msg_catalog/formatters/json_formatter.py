"""JSON formatter; its object form is the shape HTTP adapters return."""

import json
from typing import Any

from pydantic import BaseModel

from msg_catalog.formatters.base import BaseFormatter
from msg_catalog.message_model import Message


def json_ready(value: Any) -> Any:
    """Dump pydantic payloads to plain JSON types; anything else is left for json.dumps."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return value


class JsonFormatter(BaseFormatter):
    """Serializes messages to compact camelCase JSON.

    Unset optional fields are omitted unless include_null_fields is on.
    Payloads json cannot serialize raise TypeError to the caller.
    """

    def __init__(self, *args: Any, indent: int | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.indent = indent

    def _format_core(self, message: Message) -> str:
        return json.dumps(self._to_object(message), indent=self.indent, ensure_ascii=False)

    def _to_object(self, message: Message) -> dict[str, Any]:
        opts = self.options
        result: dict[str, Any] = {
            "success": message.is_success,
            "code": message.code,
            "type": message.type.value,
            "title": message.title,
            "description": message.description,
        }

        def put(key: str, enabled: bool, value: Any) -> None:
            if not enabled:
                return
            if value is None or value == "" or value == {}:
                if opts.include_null_fields:
                    result[key] = None
                return
            result[key] = value

        put("hint", opts.include_hint, message.hint)
        put("timestamp", opts.include_timestamp, message.timestamp.isoformat())
        put("correlationId", opts.include_correlation_id, message.correlation_id)
        put("data", opts.include_data, json_ready(message.data))
        put("parameters", opts.include_parameters, dict(message.parameters))

        if opts.include_metadata:
            metadata: dict[str, Any] = {}
            if opts.include_http_status_code:
                metadata["httpStatusCode"] = message.http_status_code
            for key, value in message.metadata.items():
                metadata[key] = json_ready(value)
            put("metadata", True, metadata)

        return result
