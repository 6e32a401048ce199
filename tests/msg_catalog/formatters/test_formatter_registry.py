"""Tests for FormatterRegistry and Message output helpers."""

import json
from unittest import TestCase

from msg_catalog.errors import FormatterNotFoundError
from msg_catalog.formatters.base import BaseFormatter
from msg_catalog.formatters.json_formatter import JsonFormatter
from msg_catalog.formatters.options import FormatterConfiguration, FormatterOptions
from msg_catalog.formatters.registry import FormatterRegistry, default_formatter_registry
from msg_catalog.message_model import Message
from msg_catalog.pipeline import InterceptorPipeline
from msg_catalog.templates import MessageType


class CsvFormatter(BaseFormatter):
    def _format_core(self, message):
        return f"{message.code},{message.type.value},{message.title}"

    def _to_object(self, message):
        return [message.code, message.type.value, message.title]


class TestFormatterRegistry(TestCase):
    """Tests for FormatterRegistry."""

    def setUp(self):
        self.pipeline = InterceptorPipeline()
        self.registry = FormatterRegistry(pipeline=self.pipeline, configuration=FormatterConfiguration())
        self.message = Message(code="CRUD_001", type=MessageType.SUCCESS, title="Created")

    def test_builtins(self):
        self.assertEqual(self.registry.names(), ["console", "json", "log", "text", "xml"])
        formatter = self.registry.get("JSON")
        self.assertIsInstance(formatter, JsonFormatter)
        self.assertIs(formatter.pipeline, self.pipeline)

    def test_get_returns_new_instances(self):
        self.assertIsNot(self.registry.get("json"), self.registry.get("json"))

    def test_unknown_name(self):
        with self.assertRaises(FormatterNotFoundError) as ctx:
            self.registry.get("yaml")
        self.assertIn("yaml", str(ctx.exception))
        self.assertIn("json", str(ctx.exception))

    def test_to_format_with_unregistered_name(self):
        with self.assertRaises(FormatterNotFoundError):
            self.message.to_format("yaml", registry=self.registry)

    def test_register_custom(self):
        self.registry.register("csv", lambda: CsvFormatter(pipeline=self.pipeline))
        self.assertTrue(self.registry.is_registered("CSV"))
        self.assertEqual(self.message.to_format("csv", registry=self.registry), "CRUD_001,success,Created")
        result = self.message.to_format_object("csv", registry=self.registry)
        self.assertEqual(result, ["CRUD_001", "success", "Created"])

    def test_register_requires_callable(self):
        with self.assertRaises(TypeError):
            self.registry.register("csv", CsvFormatter(pipeline=self.pipeline))

    def test_register_singleton(self):
        formatter = CsvFormatter(pipeline=self.pipeline)
        self.registry.register_singleton("csv", formatter)
        self.assertIs(self.registry.get("csv"), formatter)
        self.assertIs(self.registry.get("csv"), formatter)

    def test_clear_custom_restores_builtins(self):
        self.registry.register("csv", lambda: CsvFormatter(pipeline=self.pipeline))
        self.registry.register("json", lambda: CsvFormatter(pipeline=self.pipeline))
        self.registry.clear_custom()
        self.assertFalse(self.registry.is_registered("csv"))
        self.assertIsInstance(self.registry.get("json"), JsonFormatter)

    def test_clear(self):
        self.registry.clear()
        self.assertEqual(self.registry.names(), [])
        with self.assertRaises(FormatterNotFoundError):
            self.registry.get("json")

    def test_without_builtins(self):
        self.assertEqual(FormatterRegistry(register_builtins=False).names(), [])

    def test_default_registry_is_shared(self):
        self.assertIs(default_formatter_registry(), default_formatter_registry())


class TestMessageOutputHelpers(TestCase):
    """Tests for Message.to_* helpers with explicit options."""

    def setUp(self):
        self.message = Message(code="CRUD_001", type=MessageType.SUCCESS, title="Created", http_status_code=201)

    def test_to_json(self):
        decoded = json.loads(self.message.to_json(FormatterOptions.minimal()))
        self.assertEqual(
            decoded,
            {"success": True, "code": "CRUD_001", "type": "success", "title": "Created", "description": ""},
        )

    def test_to_json_object(self):
        result = self.message.to_json_object(FormatterOptions.api_client())
        self.assertNotIn("metadata", result)
        self.assertTrue(result["success"])

    def test_to_xml(self):
        self.assertTrue(self.message.to_xml(FormatterOptions.minimal()).startswith('<message code="CRUD_001"'))

    def test_to_plain_text(self):
        text = self.message.to_plain_text(FormatterOptions.minimal())
        self.assertEqual(text.splitlines()[0], "[SUCCESS] Created")
