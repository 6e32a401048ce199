"""Bundled default catalog shipped with the package."""

import os

from msg_catalog.catalog_document import parse_catalog
from msg_catalog.errors import ResourceNotFoundError
from msg_catalog.store_base import StoreBase
from msg_catalog.templates import MessageTemplate

DEFAULTS_FILE = os.path.join(os.path.dirname(__file__), "resources", "defaults.json")


class EmbeddedMessageStore(StoreBase):
    """Read-only store over resources/defaults.json, the fallback catalog."""

    def load(self) -> dict[str, MessageTemplate]:
        if not os.path.isfile(DEFAULTS_FILE):
            raise ResourceNotFoundError(f"Embedded resource '{DEFAULTS_FILE}' not found")
        with open(DEFAULTS_FILE, encoding="utf-8") as fh:
            return parse_catalog(fh.read(), source="defaults.json")
