"""Tests for Message and its builders."""

import logging
from datetime import timezone
from unittest import TestCase

from pydantic import ValidationError

from msg_catalog.errors import InvalidParameterShapeError
from msg_catalog.message_model import Message, check_params_shape, substitute
from msg_catalog.templates import MessageType


def make_message(**overrides):
    fields = {
        "code": "VAL_004",
        "type": MessageType.ERROR,
        "title": "Invalid {Field}",
        "description": "{field} must be between {min} and {max}.",
        "http_status_code": 422,
    }
    fields.update(overrides)
    return Message(**fields)


class TestSubstitute(TestCase):
    """Tests for placeholder substitution."""

    def test_case_insensitive(self):
        self.assertEqual(substitute("{FIELD} and {field}", {"Field": "Age"}), "Age and Age")

    def test_unknown_placeholders_are_left(self):
        self.assertEqual(substitute("{a} {b}", {"a": 1}), "1 {b}")

    def test_none_renders_empty(self):
        self.assertEqual(substitute("[{a}]", {"a": None}), "[]")

    def test_replacement_is_literal(self):
        self.assertEqual(substitute("{path}", {"path": r"C:\temp\1"}), r"C:\temp\1")


class TestCheckParamsShape(TestCase):
    """Tests for the parameter shape check."""

    def test_flat_mapping_passes(self):
        check_params_shape({"a": 1, "b": "x", "c": None, "d": 1.5, "e": True})

    def test_rejects_non_mapping(self):
        with self.assertRaises(InvalidParameterShapeError):
            check_params_shape([("a", 1)])

    def test_rejects_nested_values(self):
        for value in ({"x": 1}, [1], (1,), {1}):
            with self.subTest(value=value):
                with self.assertRaises(InvalidParameterShapeError):
                    check_params_shape({"a": value})

    def test_rejects_non_string_keys(self):
        with self.assertRaises(TypeError):
            check_params_shape({1: "a"})


class TestMessageBuilders(TestCase):
    """Tests for the with_* builders."""

    def setUp(self):
        self.message = make_message()

    def test_with_params(self):
        result = self.message.with_params({"field": "Age", "min": 18, "max": 99})
        self.assertEqual(result.title, "Invalid Age")
        self.assertEqual(result.description, "Age must be between 18 and 99.")
        self.assertEqual(result.parameters, {"field": "Age", "min": 18, "max": 99})
        self.assertEqual(self.message.title, "Invalid {Field}")

    def test_with_empty_params_keeps_text(self):
        result = self.message.with_params({})
        self.assertEqual(result.title, self.message.title)
        self.assertEqual(result.description, self.message.description)

    def test_with_params_rejects_nested(self):
        with self.assertRaises(InvalidParameterShapeError):
            self.message.with_params({"field": {"name": "Age"}})

    def test_with_params_if_provided(self):
        self.assertIs(self.message.with_params_if_provided(None), self.message)
        self.assertIs(self.message.with_params_if_provided({"field": None}), self.message)
        result = self.message.with_params_if_provided({"field": "Age", "min": None})
        self.assertEqual(result.title, "Invalid Age")
        self.assertIn("{min}", result.description)
        self.assertEqual(result.parameters, {"field": "Age"})

    def test_with_metadata_is_copy_on_write(self):
        first = self.message.with_metadata("a", 1)
        second = self.message.with_metadata("b", 2)
        first.metadata["c"] = 3
        self.assertEqual(second.metadata, {"b": 2})
        self.assertEqual(self.message.metadata, {})
        self.assertEqual(first.with_metadata("a", 10).metadata["a"], 10)

    def test_derived_messages_do_not_share_containers(self):
        base = self.message.with_metadata("a", 1).with_params({"field": "Age"})
        derived = base.with_data({"id": 1})
        self.assertIsNot(base.metadata, derived.metadata)
        self.assertIsNot(base.parameters, derived.parameters)

    def test_other_builders(self):
        result = (
            self.message.with_data({"id": 7})
            .with_correlation_id("req-1")
            .with_status_code(409)
            .with_hint("Try again")
        )
        self.assertEqual(result.data, {"id": 7})
        self.assertEqual(result.correlation_id, "req-1")
        self.assertEqual(result.http_status_code, 409)
        self.assertEqual(result.hint, "Try again")
        self.assertEqual(result.timestamp, self.message.timestamp)
        self.assertIsNone(self.message.correlation_id)

    def test_is_frozen(self):
        with self.assertRaises(ValidationError):
            self.message.title = "Changed"

    def test_timestamp_is_utc(self):
        self.assertEqual(self.message.timestamp.tzinfo, timezone.utc)

    def test_is_success(self):
        self.assertFalse(self.message.is_success)
        self.assertTrue(make_message(type=MessageType.INFO).is_success)


class TestMessageLog(TestCase):
    """Tests for Message.log."""

    def test_logs_at_type_level_and_returns_self(self):
        message = make_message().with_params({"field": "Age", "min": 1, "max": 9})
        logger = logging.getLogger("tests.msg_catalog.log")
        with self.assertLogs(logger, level="DEBUG") as logs:
            self.assertIs(message.log(logger), message)
        self.assertEqual(logs.records[0].levelno, logging.ERROR)
        self.assertEqual(logs.records[0].getMessage(), "[VAL_004] Invalid Age: Age must be between 1 and 9.")

    def test_default_logger(self):
        with self.assertLogs("msg_catalog.messages", level="INFO") as logs:
            make_message(type=MessageType.SUCCESS).log()
        self.assertEqual(logs.records[0].levelno, logging.INFO)
