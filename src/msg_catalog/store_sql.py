"""Database-backed template stores.

DatabaseMessageStore is the abstract row-reading contract; SqlMessageStore
runs a single read-only SELECT over any DB-API 2.0 connection (sqlite3,
psycopg, ...). Rows are never written.
"""

import logging
import re
from abc import abstractmethod
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from pydantic import PostgresDsn, ValidationError

from msg_catalog.errors import StoreUnavailableError
from msg_catalog.store_base import StoreBase
from msg_catalog.templates import MessageTemplate

logger = logging.getLogger(__name__)

COLUMNS = ("code", "type", "title", "description", "http_status_code", "hint")
IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")


class DatabaseMessageStore(StoreBase):
    """Abstract store reading one row per code from an external database."""

    @abstractmethod
    def fetch_rows(self) -> Iterable[Sequence[Any]]:
        """Return rows in COLUMNS order. Must not modify the database."""
        pass

    def load(self) -> dict[str, MessageTemplate]:
        try:
            rows = list(self.fetch_rows())
        except StoreUnavailableError:
            raise
        except Exception as err:
            raise StoreUnavailableError(f"{self.name} query failed: {err}") from err

        templates: dict[str, MessageTemplate] = {}
        for row in rows:
            values = dict(zip(COLUMNS, row))
            code = values.pop("code")
            try:
                templates[code] = MessageTemplate.model_validate(values)
            except ValidationError as err:
                logger.warning("Skipping row %r from %s: %s", code, self.name, err)
        return templates


class SqlMessageStore(DatabaseMessageStore):
    """Reads templates with SELECT over a connection from connect().

    A new connection is opened and closed for every load, so the store keeps
    no state between loads.
    """

    def __init__(self, connect: Callable[[], Any], table: str = "messages") -> None:
        if not IDENTIFIER.match(table):
            raise ValueError(f"Invalid table name: {table!r}")
        self.connect = connect
        self.table = table

    @classmethod
    def from_dsn(cls, dsn: PostgresDsn | str, table: str = "messages") -> "SqlMessageStore":
        """Build a store reading from PostgreSQL at dsn through psycopg."""
        import psycopg

        conninfo = str(dsn)
        return cls(lambda: psycopg.connect(conninfo), table=table)

    @property
    def name(self) -> str:
        return f"SqlMessageStore({self.table})"

    @property
    def query(self) -> str:
        return f"SELECT {', '.join(COLUMNS)} FROM {self.table}"

    def fetch_rows(self) -> list[Sequence[Any]]:
        conn = self.connect()
        try:
            cursor = conn.cursor()
            try:
                cursor.execute(self.query)
                return cursor.fetchall()
            finally:
                cursor.close()
        finally:
            conn.close()
