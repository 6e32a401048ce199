"""Tests for MessageRegistry."""

import threading
from unittest import TestCase

from msg_catalog.errors import MessageNotFoundError, StoreUnavailableError
from msg_catalog.registry import MessageRegistry, default_registry, get_message
from msg_catalog.store_base import StoreBase
from msg_catalog.store_dict import DictMessageStore
from msg_catalog.templates import MessageType

DEFAULTS = DictMessageStore(
    {
        "CRUD_001": {"type": "Success", "title": "Created", "httpStatusCode": 200},
        "VAL_002": {
            "type": "Warning",
            "title": "{field} is required",
            "description": "Please provide {field}.",
        },
        "ERR_001": {"type": "Error", "title": "Broken"},
        "CRIT_001": {"type": "Critical", "title": "Down"},
        "WARN_001": {"type": "Warning", "title": "Careful"},
        "BARE_001": {},
    }
)


class CountingStore(StoreBase):
    def __init__(self, messages):
        self.inner = DictMessageStore(messages)
        self.calls = 0

    def load(self):
        self.calls += 1
        return self.inner.load()


class FailingStore(StoreBase):
    def load(self):
        raise StoreUnavailableError("offline")


class GatedStore(StoreBase):
    """Signals entered when load starts, then waits for release."""

    def __init__(self, messages):
        self.inner = DictMessageStore(messages)
        self.entered = threading.Event()
        self.release = threading.Event()

    def load(self):
        self.entered.set()
        self.release.wait(5)
        return self.inner.load()


class TestMessageRegistry(TestCase):
    """Tests for code resolution."""

    def setUp(self):
        self.registry = MessageRegistry(defaults=DEFAULTS)

    def test_params_scenario(self):
        message = self.registry.get("VAL_002").with_params({"field": "Email"})
        self.assertEqual(message.title, "Email is required")
        self.assertEqual(message.description, "Please provide Email.")

    def test_partial_override_scenario(self):
        self.registry.configure(DictMessageStore({"CRUD_001": {"title": "Record Created"}}))
        message = self.registry.get("CRUD_001")
        self.assertEqual(message.title, "Record Created")
        self.assertEqual(message.http_status_code, 200)
        self.assertIs(message.type, MessageType.SUCCESS)

    def test_unknown_code(self):
        with self.assertRaises(MessageNotFoundError) as ctx:
            self.registry.get("NOT_A_CODE")
        self.assertIn("NOT_A_CODE", str(ctx.exception))
        self.assertIn("CRUD_001", str(ctx.exception))
        with self.assertRaises(KeyError):
            self.registry.get("NOT_A_CODE")

    def test_default_status_codes(self):
        self.assertEqual(self.registry.get("ERR_001").http_status_code, 400)
        self.assertEqual(self.registry.get("CRIT_001").http_status_code, 400)
        self.assertEqual(self.registry.get("WARN_001").http_status_code, 200)

    def test_configurable_warning_status(self):
        registry = MessageRegistry(defaults=DEFAULTS, warning_status_code=299)
        self.assertEqual(registry.get("WARN_001").http_status_code, 299)

    def test_bare_template_defaults(self):
        message = self.registry.get("BARE_001")
        self.assertIs(message.type, MessageType.INFO)
        self.assertEqual(message.title, "")
        self.assertEqual(message.description, "")
        self.assertEqual(message.http_status_code, 200)

    def test_each_get_returns_a_fresh_message(self):
        first = self.registry.get("CRUD_001")
        second = self.registry.get("CRUD_001")
        self.assertIsNot(first, second)
        self.assertIsNot(first.metadata, second.metadata)

    def test_try_get_and_contains(self):
        self.assertIsNone(self.registry.try_get("NOT_A_CODE"))
        self.assertEqual(self.registry.try_get("ERR_001").title, "Broken")
        self.assertIn("ERR_001", self.registry)
        self.assertNotIn("NOT_A_CODE", self.registry)

    def test_get_all_codes_is_sorted(self):
        self.assertEqual(
            self.registry.get_all_codes(),
            ["BARE_001", "CRIT_001", "CRUD_001", "ERR_001", "VAL_002", "WARN_001"],
        )

    def test_failing_store_is_skipped(self):
        self.registry.configure(FailingStore(), DictMessageStore({"NEW_001": {"title": "New"}}))
        with self.assertLogs("msg_catalog.merge", level="WARNING"):
            self.assertEqual(self.registry.get("NEW_001").title, "New")
        self.assertEqual([f.store for f in self.registry.merge_failures], ["FailingStore"])
        self.assertEqual(self.registry.get("CRUD_001").title, "Created")

    def test_snapshot_is_built_once(self):
        store = CountingStore({"A": {"title": "a"}})
        self.registry.configure(store)
        self.registry.get("A")
        self.registry.get("A")
        self.assertEqual(store.calls, 1)

    def test_configure_during_load_is_not_overwritten(self):
        gated = GatedStore({"A": {"title": "old"}})
        self.addCleanup(gated.release.set)
        registry = MessageRegistry(gated, include_defaults=False)
        titles = []
        reader = threading.Thread(target=lambda: titles.append(registry.get("A").title))
        reader.start()
        self.assertTrue(gated.entered.wait(5))

        registry.configure(DictMessageStore({"A": {"title": "new"}}))
        gated.release.set()
        reader.join(5)

        self.assertEqual(titles, ["old"])
        self.assertEqual(registry.get("A").title, "new")

    def test_configure_eager_loads_immediately(self):
        store = CountingStore({"A": {"title": "a"}})
        self.registry.configure(store, eager=True)
        self.assertEqual(store.calls, 1)

    def test_reload_rereads_stores(self):
        store = CountingStore({"A": {"title": "a"}})
        self.registry.configure(store)
        self.registry.get("A")
        self.registry.reload()
        self.assertEqual(store.calls, 2)

    def test_reset_drops_custom_stores(self):
        self.registry.configure(DictMessageStore({"A": {"title": "a"}}))
        self.assertIn("A", self.registry)
        self.registry.reset()
        self.assertNotIn("A", self.registry)
        self.assertEqual(self.registry.stores, (DEFAULTS,))

    def test_without_defaults(self):
        registry = MessageRegistry(DictMessageStore({"A": {"title": "a"}}), include_defaults=False)
        self.assertEqual(registry.get_all_codes(), ["A"])

    def test_concurrent_lookups_share_one_snapshot(self):
        store = CountingStore({"A": {"title": "a"}})
        registry = MessageRegistry(store, include_defaults=False)
        registry.get("A")
        errors = []

        def worker():
            try:
                for _ in range(50):
                    registry.get("A").with_metadata("thread", threading.get_ident())
            except Exception as err:
                errors.append(err)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.assertEqual(errors, [])
        self.assertEqual(store.calls, 1)


class TestDefaultRegistry(TestCase):
    """Tests for the process-wide registry over the bundled catalog."""

    def test_default_registry_is_shared(self):
        self.assertIs(default_registry(), default_registry())

    def test_get_message_uses_bundled_catalog(self):
        message = get_message("AUTH_001")
        self.assertIs(message.type, MessageType.ERROR)
        self.assertEqual(message.http_status_code, 401)
        self.assertFalse(message.is_success)
