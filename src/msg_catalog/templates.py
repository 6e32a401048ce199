"""Catalog-resident message definitions.

A MessageTemplate is what a store yields for one code. Every field is
optional so a customizing source may override only what it cares about and
inherit the rest during the merge.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MessageType(str, Enum):
    """Outcome category of a message."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @classmethod
    def parse(cls, value: "MessageType | str | int") -> "MessageType":
        """Accept a member, a case-insensitive name or a 0-4 ordinal."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
            raise ValueError(f"Invalid message type ordinal: {value}")
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError as err:
                valid = ", ".join(m.name.capitalize() for m in cls)
                raise ValueError(f"Invalid message type: {value!r}. Valid types are: {valid}") from err
        raise ValueError(f"Invalid message type: {value!r}")

    @property
    def label(self) -> str:
        """Capitalized display name, e.g. 'Warning'."""
        return self.name.capitalize()

    @property
    def is_success(self) -> bool:
        return self in (MessageType.SUCCESS, MessageType.INFO)


class MessageTemplate(BaseModel):
    """Definition of one code as read from a catalog source."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    type: MessageType | None = Field(None, description="Outcome category")
    title: str | None = Field(None, description="Short title, may contain {placeholders}")
    description: str | None = Field(None, description="Longer text, may contain {placeholders}")
    http_status_code: int | None = Field(None, alias="httpStatusCode", description="HTTP status to report")
    hint: str | None = Field(None, description="Optional hint for the end user")

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value):
        if value is None:
            return None
        return MessageType.parse(value)
