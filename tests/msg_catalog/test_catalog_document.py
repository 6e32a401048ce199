"""Tests for catalog document parsing."""

import json
from unittest import TestCase

from msg_catalog.catalog_document import parse_catalog
from msg_catalog.errors import InvalidMessageFileError, MessageCatalogError
from msg_catalog.templates import MessageType


class TestParseCatalog(TestCase):
    """Tests for parse_catalog."""

    def test_full_format(self):
        text = json.dumps(
            {
                "$schema": "https://example.com/schema.json",
                "version": "1.0",
                "messages": {"APP_001": {"type": "Success", "title": "Done"}},
            }
        )
        templates = parse_catalog(text)
        self.assertEqual(list(templates), ["APP_001"])
        self.assertIs(templates["APP_001"].type, MessageType.SUCCESS)

    def test_simple_format_skips_document_keys(self):
        text = json.dumps({"version": "2", "APP_001": {"title": "A"}, "APP_002": {"title": "B"}})
        templates = parse_catalog(text)
        self.assertEqual(sorted(templates), ["APP_001", "APP_002"])

    def test_comment_keys_are_skipped(self):
        text = json.dumps({"_comment": "ignored", "APP_001": {"title": "A"}})
        self.assertEqual(list(parse_catalog(text)), ["APP_001"])

    def test_partial_entries_keep_unset_fields_none(self):
        templates = parse_catalog(json.dumps({"CRUD_001": {"title": "Saved!"}}))
        self.assertEqual(templates["CRUD_001"].title, "Saved!")
        self.assertIsNone(templates["CRUD_001"].type)
        self.assertIsNone(templates["CRUD_001"].description)

    def test_empty_document(self):
        with self.assertRaises(InvalidMessageFileError):
            parse_catalog("   ")

    def test_malformed_json_reports_position(self):
        with self.assertRaises(InvalidMessageFileError) as ctx:
            parse_catalog('{"APP_001": {"title": }', source="bad.json")
        self.assertIn("bad.json", str(ctx.exception))
        self.assertIn("line 1", str(ctx.exception))

    def test_root_must_be_object(self):
        with self.assertRaises(InvalidMessageFileError):
            parse_catalog("[1, 2]")

    def test_messages_must_be_object(self):
        with self.assertRaises(InvalidMessageFileError):
            parse_catalog(json.dumps({"messages": ["APP_001"]}))

    def test_typo_of_messages_key(self):
        with self.assertRaises(InvalidMessageFileError) as ctx:
            parse_catalog(json.dumps({"mesages": {"APP_001": {"title": "A"}}}))
        self.assertIn("Did you mean 'messages'", str(ctx.exception))

    def test_invalid_entries_are_skipped_when_others_parse(self):
        text = json.dumps({"APP_001": {"title": "A"}, "APP_002": {"type": "Fatal"}, "APP_003": "nope"})
        with self.assertLogs("msg_catalog.catalog_document", level="WARNING") as logs:
            templates = parse_catalog(text)
        self.assertEqual(list(templates), ["APP_001"])
        self.assertIn("APP_002", logs.output[0])
        self.assertIn("APP_003", logs.output[0])

    def test_no_valid_entries(self):
        with self.assertRaises(InvalidMessageFileError) as ctx:
            parse_catalog(json.dumps({"APP_002": {"type": "Fatal"}}))
        self.assertIn("APP_002", str(ctx.exception))

    def test_errors_share_a_common_base(self):
        with self.assertRaises(MessageCatalogError):
            parse_catalog("{}")
        with self.assertRaises(ValueError):
            parse_catalog("{}")
