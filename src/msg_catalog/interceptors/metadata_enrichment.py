"""Enrich message metadata with request context fields."""

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, Field

from msg_catalog.context import current_request_fields
from msg_catalog.interceptors.base import BaseInterceptor
from msg_catalog.message_model import Message


class MetadataEnrichmentFields(BaseModel):
    """Which request fields are copied into metadata."""

    include_request_path: bool = Field(True, description="Add requestPath")
    include_request_method: bool = Field(True, description="Add requestMethod")
    include_user_agent: bool = Field(False, description="Add userAgent")
    include_ip_address: bool = Field(False, description="Add ipAddress")
    include_user_id: bool = Field(False, description="Add userId")
    include_user_name: bool = Field(False, description="Add userName")


# (toggle, context field, metadata key)
FIELD_MAP = (
    ("include_request_path", "path", "requestPath"),
    ("include_request_method", "method", "requestMethod"),
    ("include_user_agent", "user_agent", "userAgent"),
    ("include_ip_address", "ip_address", "ipAddress"),
    ("include_user_id", "user_id", "userId"),
    ("include_user_name", "user_name", "userName"),
)


class MetadataEnrichmentInterceptor(BaseInterceptor):
    """Adds enabled request fields to metadata; a no-op outside a request."""

    def __init__(
        self,
        provider: Callable[[], Mapping[str, Any] | None] | None = None,
        fields: MetadataEnrichmentFields | None = None,
    ) -> None:
        self.provider = provider or current_request_fields
        self.fields = fields or MetadataEnrichmentFields()

    def on_before_format(self, message: Message) -> Message:
        context = self.provider()
        if not context:
            return message

        result = message
        for toggle, source, key in FIELD_MAP:
            if not getattr(self.fields, toggle):
                continue
            value = context.get(source)
            if value is None:
                continue
            result = result.with_metadata(key, value)
        return result
