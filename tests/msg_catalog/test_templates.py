"""Tests for MessageType and MessageTemplate."""

from unittest import TestCase

from pydantic import ValidationError

from msg_catalog.templates import MessageTemplate, MessageType


class TestMessageTypeParse(TestCase):
    """Tests for MessageType.parse."""

    def test_parse_is_case_insensitive(self):
        self.assertIs(MessageType.parse("Error"), MessageType.ERROR)
        self.assertIs(MessageType.parse("WARNING"), MessageType.WARNING)
        self.assertIs(MessageType.parse(" success "), MessageType.SUCCESS)

    def test_parse_ordinals(self):
        self.assertIs(MessageType.parse(0), MessageType.SUCCESS)
        self.assertIs(MessageType.parse(4), MessageType.CRITICAL)

    def test_parse_member_is_identity(self):
        self.assertIs(MessageType.parse(MessageType.INFO), MessageType.INFO)

    def test_parse_rejects_unknown_values(self):
        for value in ("Fatal", 5, -1, True, None, 1.5):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    MessageType.parse(value)

    def test_label_and_success(self):
        self.assertEqual(MessageType.CRITICAL.label, "Critical")
        self.assertTrue(MessageType.SUCCESS.is_success)
        self.assertTrue(MessageType.INFO.is_success)
        self.assertFalse(MessageType.WARNING.is_success)
        self.assertFalse(MessageType.ERROR.is_success)


class TestMessageTemplate(TestCase):
    """Tests for MessageTemplate validation."""

    def test_reads_catalog_document_keys(self):
        template = MessageTemplate.model_validate(
            {"type": "Error", "title": "Oops", "description": "Broken", "httpStatusCode": 500, "hint": "Retry"}
        )
        self.assertIs(template.type, MessageType.ERROR)
        self.assertEqual(template.http_status_code, 500)
        self.assertEqual(template.hint, "Retry")

    def test_all_fields_optional(self):
        template = MessageTemplate()
        self.assertIsNone(template.type)
        self.assertIsNone(template.title)
        self.assertIsNone(template.http_status_code)

    def test_accepts_field_names(self):
        template = MessageTemplate(type=MessageType.INFO, http_status_code=202)
        self.assertEqual(template.http_status_code, 202)

    def test_unknown_keys_are_ignored(self):
        template = MessageTemplate.model_validate({"title": "T", "extra": 1})
        self.assertEqual(template.title, "T")

    def test_invalid_type_fails_validation(self):
        with self.assertRaises(ValidationError):
            MessageTemplate.model_validate({"type": "Fatal"})

    def test_is_frozen(self):
        template = MessageTemplate(title="T")
        with self.assertRaises(ValidationError):
            template.title = "Other"
