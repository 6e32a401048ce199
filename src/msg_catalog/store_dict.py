"""In-memory template store."""

from collections.abc import Mapping
from typing import Any

from msg_catalog.store_base import StoreBase
from msg_catalog.templates import MessageTemplate


class DictMessageStore(StoreBase):
    """Wraps a pre-built mapping of code to template; always loads.

    Values may be MessageTemplate instances or plain dicts in catalog
    document form ({"type": "Error", "title": ...}).
    """

    def __init__(self, messages: Mapping[str, MessageTemplate | Mapping[str, Any]]) -> None:
        if messages is None:
            raise TypeError("messages must not be None")
        self._messages = {
            code: value if isinstance(value, MessageTemplate) else MessageTemplate.model_validate(dict(value))
            for code, value in messages.items()
        }

    def load(self) -> dict[str, MessageTemplate]:
        return dict(self._messages)

    def __repr__(self) -> str:
        return f"DictMessageStore({len(self._messages)} messages)"
