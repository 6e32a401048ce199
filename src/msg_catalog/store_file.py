"""JSON file-backed template store."""

import os

from msg_catalog.catalog_document import parse_catalog
from msg_catalog.errors import InvalidMessageFileError, ResourceNotFoundError
from msg_catalog.store_base import StoreBase
from msg_catalog.templates import MessageTemplate


class FileMessageStore(StoreBase):
    """Loads templates from one JSON catalog file on disk."""

    def __init__(self, path: str | os.PathLike) -> None:
        if path is None:
            raise TypeError("path must not be None")
        self.path = os.fspath(path)

    @property
    def name(self) -> str:
        return f"FileMessageStore({self.path})"

    def load(self) -> dict[str, MessageTemplate]:
        """Read and parse the file; fails if it is absent or malformed."""
        if not os.path.isfile(self.path):
            raise ResourceNotFoundError(f"Message file not found: {self.path}")
        try:
            with open(self.path, encoding="utf-8") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as err:
            raise InvalidMessageFileError(f"Failed to read message file '{self.path}': {err}") from err
        return parse_catalog(text, source=self.path)

    def __repr__(self) -> str:
        return f"FileMessageStore({self.path!r})"
