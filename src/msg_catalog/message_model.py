"""The immutable runtime message and its builder operations.

A Message is resolved from the registry and then customized per call site
with the with_* builders. Each builder returns a new Message that owns fresh
copies of metadata and parameters, so a resolved message can be shared
between threads and customized independently.

    msg = registry.get("VAL_002").with_params({"field": "Email"}).with_correlation_id(request_id)
    body = msg.to_json()
"""

import logging
import re
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from msg_catalog.errors import InvalidParameterShapeError
from msg_catalog.templates import MessageType

if TYPE_CHECKING:
    from msg_catalog.formatters.options import FormatterOptions
    from msg_catalog.formatters.registry import FormatterRegistry

NESTED_TYPES = (Mapping, list, tuple, set, frozenset)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def substitute(text: str, params: Mapping[str, Any]) -> str:
    """Replace {name} placeholders case-insensitively; unknown ones are left as is."""
    for key, value in params.items():
        replacement = "" if value is None else str(value)
        pattern = re.compile(re.escape("{" + key + "}"), re.IGNORECASE)
        text = pattern.sub(lambda _: replacement, text)
    return text


def check_params_shape(params: Any) -> None:
    """Raise InvalidParameterShapeError unless params is a flat str-keyed mapping."""
    if not isinstance(params, Mapping):
        raise InvalidParameterShapeError(
            f"Parameters must be a mapping of name to value, got {type(params).__name__}"
        )
    for key, value in params.items():
        if not isinstance(key, str):
            raise InvalidParameterShapeError(f"Parameter names must be strings, got {key!r}")
        if isinstance(value, NESTED_TYPES):
            raise InvalidParameterShapeError(
                f"Parameter '{key}' is a {type(value).__name__}; nested values are not supported"
            )


class Message(BaseModel):
    """A resolved, immutable result message."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Catalog code, e.g. AUTH_001")
    type: MessageType = Field(..., description="Outcome category")
    title: str = Field("", description="Short title")
    description: str = Field("", description="Longer description")
    http_status_code: int | None = Field(None, description="HTTP status to report")
    hint: str | None = Field(None, description="Optional hint for the end user")
    timestamp: datetime = Field(default_factory=utc_now, description="UTC time of resolution")
    correlation_id: str | None = Field(None, description="Trace identifier across calls")
    data: Any = Field(None, description="Arbitrary payload")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Extra key/value context")
    parameters: dict[str, Any] = Field(default_factory=dict, description="Parameters of the last substitution")

    @property
    def is_success(self) -> bool:
        """True for Success and Info messages."""
        return self.type.is_success

    def _derive(self, **changes: Any) -> "Message":
        update = {"metadata": dict(self.metadata), "parameters": dict(self.parameters)}
        update.update(changes)
        return self.model_copy(update=update)

    # builders

    def with_data(self, data: Any) -> "Message":
        return self._derive(data=data)

    def with_metadata(self, key: str, value: Any) -> "Message":
        metadata = dict(self.metadata)
        metadata[key] = value
        return self._derive(metadata=metadata)

    def with_correlation_id(self, correlation_id: str | None) -> "Message":
        return self._derive(correlation_id=correlation_id)

    def with_status_code(self, status_code: int) -> "Message":
        return self._derive(http_status_code=status_code)

    def with_hint(self, hint: str | None) -> "Message":
        return self._derive(hint=hint)

    def with_params(self, params: Mapping[str, Any]) -> "Message":
        """Substitute {placeholders} in title and description.

        Matching is case-insensitive, values are rendered with str() (None
        renders as an empty string) and placeholders without a parameter are
        left untouched. The mapping is kept on the result as parameters.

        Raises:
            InvalidParameterShapeError: If params is not a flat mapping.
        """
        check_params_shape(params)
        return self._derive(
            title=substitute(self.title, params),
            description=substitute(self.description, params),
            parameters=dict(params),
        )

    def with_params_if_provided(self, params: Mapping[str, Any] | None) -> "Message":
        """Like with_params but ignores None values; a no-op when nothing remains."""
        if params is None:
            return self
        check_params_shape(params)
        provided = {key: value for key, value in params.items() if value is not None}
        if not provided:
            return self
        return self.with_params(provided)

    # output

    def to_format(self, name: str, registry: "FormatterRegistry | None" = None) -> str:
        """Render with the formatter registered under name."""
        from msg_catalog.formatters.registry import default_formatter_registry

        return (registry or default_formatter_registry()).get(name).format(self)

    def to_format_object(self, name: str, registry: "FormatterRegistry | None" = None) -> Any:
        from msg_catalog.formatters.registry import default_formatter_registry

        return (registry or default_formatter_registry()).get(name).format_as_object(self)

    def to_json(self, options: "FormatterOptions | None" = None) -> str:
        from msg_catalog.formatters.json_formatter import JsonFormatter

        if options is not None:
            return JsonFormatter(options=options).format(self)
        return self.to_format("json")

    def to_json_object(self, options: "FormatterOptions | None" = None) -> dict[str, Any]:
        from msg_catalog.formatters.json_formatter import JsonFormatter

        if options is not None:
            return JsonFormatter(options=options).format_as_object(self)
        return self.to_format_object("json")

    def to_xml(self, options: "FormatterOptions | None" = None) -> str:
        from msg_catalog.formatters.xml_formatter import XmlFormatter

        if options is not None:
            return XmlFormatter(options=options).format(self)
        return self.to_format("xml")

    def to_plain_text(self, options: "FormatterOptions | None" = None) -> str:
        from msg_catalog.formatters.text_formatter import PlainTextFormatter

        if options is not None:
            return PlainTextFormatter(options=options).format(self)
        return self.to_format("text")

    def to_console(self, use_colors: bool = True) -> None:
        """Print the message to the terminal, colored by type."""
        from msg_catalog.formatters.console_formatter import ConsoleFormatter

        ConsoleFormatter(use_colors=use_colors).write(self)

    def log(self, logger: logging.Logger | None = None) -> "Message":
        """Log "[code] title: description" at the level for this type and return self."""
        from msg_catalog.interceptors.logging_interceptor import log_level_for

        logger = logger or logging.getLogger("msg_catalog.messages")
        logger.log(log_level_for(self.type), "[%s] %s: %s", self.code, self.title, self.description)
        return self
