"""Message registry: resolves codes to Messages from the merged catalog.

The registry owns the bundled defaults store (lowest precedence) followed by
the stores passed to configure(). The merged snapshot is built lazily on
first use (or eagerly) and swapped in under a lock, so readers always see
either the previous or the new catalog, never a partial merge. Stores are
loaded outside the lock; a slow store does not block lookups against the
current snapshot.
"""

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType

from msg_catalog.errors import MessageNotFoundError
from msg_catalog.merge import merge_stores
from msg_catalog.message_model import Message
from msg_catalog.store_base import StoreBase, StoreFailure
from msg_catalog.store_embedded import EmbeddedMessageStore
from msg_catalog.templates import MessageTemplate, MessageType

logger = logging.getLogger(__name__)

DEFAULT_STATUS_CODES = {
    MessageType.SUCCESS: 200,
    MessageType.INFO: 200,
    MessageType.ERROR: 400,
    MessageType.CRITICAL: 400,
}


class _Snapshot:
    """An immutable merged catalog plus the failures seen building it."""

    def __init__(self, templates: dict[str, MessageTemplate], failures: list[StoreFailure]) -> None:
        self.templates: Mapping[str, MessageTemplate] = MappingProxyType(templates)
        self.failures = tuple(failures)


class MessageRegistry:
    """Resolves codes against a prioritized list of stores.

    Args:
        stores: Custom stores in ascending precedence (last wins).
        defaults: Lowest-precedence store; the bundled catalog unless given.
            Pass include_defaults=False to resolve from stores only.
        warning_status_code: Status for Warning messages without one.
        load_timeout: Seconds to wait for each store while merging.
    """

    def __init__(
        self,
        *stores: StoreBase,
        defaults: StoreBase | None = None,
        include_defaults: bool = True,
        warning_status_code: int = 200,
        load_timeout: float | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._defaults = (defaults or EmbeddedMessageStore()) if include_defaults else None
        self._stores: tuple[StoreBase, ...] = tuple(stores)
        self._snapshot: _Snapshot | None = None
        self._generation = 0
        self.warning_status_code = warning_status_code
        self.load_timeout = load_timeout

    @property
    def stores(self) -> tuple[StoreBase, ...]:
        """Every active store in ascending precedence, defaults first."""
        with self._lock:
            return self._active_stores()

    def _active_stores(self) -> tuple[StoreBase, ...]:
        if self._defaults is None:
            return self._stores
        return (self._defaults, *self._stores)

    def configure(self, *stores: StoreBase, eager: bool = False) -> None:
        """Replace the custom stores and drop the merged snapshot.

        The next lookup rebuilds the catalog, or it is rebuilt now with
        eager=True.
        """
        with self._lock:
            self._stores = tuple(stores)
            self._snapshot = None
            self._generation += 1
        logger.info("Message registry configured with %d custom store(s)", len(stores))
        if eager:
            self._ensure_snapshot()

    def reset(self) -> None:
        """Drop every custom store, leaving only the defaults."""
        self.configure()

    def reload(self) -> None:
        """Rebuild the catalog from the current stores now."""
        with self._lock:
            self._snapshot = None
            self._generation += 1
        self._ensure_snapshot()

    def _ensure_snapshot(self) -> _Snapshot:
        with self._lock:
            if self._snapshot is not None:
                return self._snapshot
            stores = self._active_stores()
            generation = self._generation

        result = merge_stores(stores, timeout=self.load_timeout)
        snapshot = _Snapshot(result.templates, result.failures)
        logger.info(
            "Merged %d message(s) from %d store(s), %d skipped",
            len(snapshot.templates),
            len(stores),
            len(snapshot.failures),
        )

        with self._lock:
            if self._generation != generation:
                # superseded by a concurrent configure(); still answers this lookup
                return snapshot
            if self._snapshot is None:
                self._snapshot = snapshot
            return self._snapshot

    @property
    def merge_failures(self) -> tuple[StoreFailure, ...]:
        """Stores skipped while building the current catalog."""
        return self._ensure_snapshot().failures

    def get_template(self, code: str) -> MessageTemplate | None:
        return self._ensure_snapshot().templates.get(code)

    def get(self, code: str) -> Message:
        """Resolve code to a new Message stamped with the current time.

        Raises:
            MessageNotFoundError: If no store defines the code.
        """
        templates = self._ensure_snapshot().templates
        template = templates.get(code)
        if template is None:
            available = sorted(templates)
            preview = ", ".join(available[:10])
            more = "..." if len(available) > 10 else ""
            raise MessageNotFoundError(
                f"Message code '{code}' not found in registry. Available codes: {preview}{more}"
            )
        return self.build_message(code, template)

    def try_get(self, code: str) -> Message | None:
        template = self.get_template(code)
        return self.build_message(code, template) if template is not None else None

    def __contains__(self, code: object) -> bool:
        return code in self._ensure_snapshot().templates

    def get_all_codes(self) -> list[str]:
        return sorted(self._ensure_snapshot().templates)

    def default_status_code(self, message_type: MessageType) -> int:
        if message_type is MessageType.WARNING:
            return self.warning_status_code
        return DEFAULT_STATUS_CODES[message_type]

    def build_message(self, code: str, template: MessageTemplate) -> Message:
        """Turn a merged template into a Message, filling defaults for unset fields."""
        message_type = template.type or MessageType.INFO
        status = template.http_status_code
        if status is None:
            status = self.default_status_code(message_type)
        return Message(
            code=code,
            type=message_type,
            title=template.title or "",
            description=template.description or "",
            http_status_code=status,
            hint=template.hint,
        )


_default_registry: MessageRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> MessageRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = MessageRegistry()
        return _default_registry


def get_message(code: str) -> Message:
    """Resolve code with the process-wide registry."""
    return default_registry().get(code)
