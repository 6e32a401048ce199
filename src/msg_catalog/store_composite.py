"""Store combining an ordered list of other stores."""

from collections.abc import Sequence

from msg_catalog.merge import MergeResult, merge_stores
from msg_catalog.store_base import StoreBase
from msg_catalog.templates import MessageTemplate


class CompositeMessageStore(StoreBase):
    """Merges its stores in order; the last store has the highest precedence.

    Example (custom file overrides the database, which overrides defaults):

        CompositeMessageStore(
            EmbeddedMessageStore(),
            SqlMessageStore.from_dsn(dsn),
            FileMessageStore("custom.json"),
        )
    """

    def __init__(self, *stores: StoreBase, timeout: float | None = None) -> None:
        self.stores: Sequence[StoreBase] = tuple(stores)
        self.timeout = timeout

    def merge(self) -> MergeResult:
        """Merge the wrapped stores, returning skipped stores alongside the templates."""
        return merge_stores(self.stores, timeout=self.timeout)

    def load(self) -> dict[str, MessageTemplate]:
        return self.merge().templates

    def __repr__(self) -> str:
        return f"CompositeMessageStore({', '.join(repr(s) for s in self.stores)})"
