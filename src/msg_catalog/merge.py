"""Combine templates from several stores into one catalog.

Stores are merged in list order and later stores win. The merge is a
partial override: a later template replaces only the fields it sets (not
None) and inherits the rest from what came before. An explicit empty string
counts as set, which is how a customizing source clears a field.

A store that fails to load is skipped and reported in MergeResult.failures;
it never aborts the merge.
"""

import logging
import threading
import time
from collections.abc import Iterable, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from msg_catalog.store_base import LoadResult, StoreBase, StoreFailure
from msg_catalog.templates import MessageTemplate

logger = logging.getLogger(__name__)

TEMPLATE_FIELDS = tuple(MessageTemplate.model_fields)


class MergeResult(BaseModel):
    """Merged catalog plus the stores that were skipped."""

    model_config = ConfigDict(frozen=True)

    templates: dict[str, MessageTemplate] = Field(default_factory=dict)
    failures: list[StoreFailure] = Field(default_factory=list)


def merge_templates(base: MessageTemplate, override: MessageTemplate) -> MessageTemplate:
    """Return base with every non-None field of override applied."""
    changes = {name: getattr(override, name) for name in TEMPLATE_FIELDS if getattr(override, name) is not None}
    if not changes:
        return base
    return base.model_copy(update=changes)


def merge_catalogs(catalogs: Iterable[Mapping[str, MessageTemplate]]) -> dict[str, MessageTemplate]:
    """Fold catalogs left to right; later catalogs take precedence."""
    merged: dict[str, MessageTemplate] = {}
    for catalog in catalogs:
        for code, template in catalog.items():
            if code in merged:
                merged[code] = merge_templates(merged[code], template)
            else:
                merged[code] = template
    return merged


def merge_stores(stores: Sequence[StoreBase], timeout: float | None = None) -> MergeResult:
    """Load every store and merge the ones that succeeded.

    Args:
        stores: Stores in ascending precedence.
        timeout: Seconds to wait for each store. The stores load in parallel
            on daemon threads and one still running at the deadline is
            reported as a timeout. None loads the stores one after another
            on the calling thread.
    """
    results = _load_all(stores, timeout)

    failures: list[StoreFailure] = []
    catalogs: list[dict[str, MessageTemplate]] = []
    for result in results:
        if result.ok:
            catalogs.append(result.templates)
            continue
        logger.warning("Skipping %s: %s", result.failure.store, result.failure.message)
        failures.append(result.failure)

    return MergeResult(templates=merge_catalogs(catalogs), failures=failures)


def _load_all(stores: Sequence[StoreBase], timeout: float | None) -> list[LoadResult]:
    if timeout is None:
        return [store.try_load() for store in stores]

    # daemon threads: a hung store must not keep the interpreter from exiting
    results: list[LoadResult | None] = [None] * len(stores)

    def run(index: int, store: StoreBase) -> None:
        results[index] = store.try_load()

    threads = []
    for index, store in enumerate(stores):
        thread = threading.Thread(target=run, args=(index, store), name=f"msg-catalog-load-{index}", daemon=True)
        thread.start()
        threads.append(thread)

    deadline = time.monotonic() + timeout
    loaded = []
    for index, (store, thread) in enumerate(zip(stores, threads)):
        thread.join(max(deadline - time.monotonic(), 0))
        result = results[index]
        if thread.is_alive() or result is None:
            result = LoadResult(
                failure=StoreFailure(
                    store=store.name,
                    kind="timeout",
                    message=f"{store.name} did not load within {timeout} seconds",
                )
            )
        loaded.append(result)
    return loaded
