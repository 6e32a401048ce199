"""Parse JSON catalog documents into templates.

Two layouts are accepted:

    {"$schema": "...", "version": "1.0", "messages": {"AUTH_001": {...}}}
    {"AUTH_001": {...}, "AUTH_002": {...}}

Keys starting with "_" are treated as comments. Individual entries that do
not parse are reported as a warning; the document is only rejected when no
entry at all could be read.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from msg_catalog.errors import InvalidMessageFileError
from msg_catalog.templates import MessageTemplate

logger = logging.getLogger(__name__)

DOCUMENT_KEYS = ("$schema", "version")
TYPO_KEYS = ("message", "mssages", "mesages")


def parse_catalog(text: str, source: str = "<string>") -> dict[str, MessageTemplate]:
    """Return code -> template for the JSON catalog document in text.

    Raises:
        InvalidMessageFileError: If the document is empty, malformed or holds
            no valid message definitions.
    """
    if text is None or not text.strip():
        raise InvalidMessageFileError(f"Message file is empty: {source}")

    try:
        root = json.loads(text)
    except json.JSONDecodeError as err:
        raise InvalidMessageFileError(
            f"Malformed JSON in message file {source}: {err.msg}. "
            f"Please check your JSON syntax at line {err.lineno}, column {err.colno}."
        ) from err

    if not isinstance(root, dict):
        raise InvalidMessageFileError(f"Message file {source} must be a JSON object at the root level.")

    if "messages" in root:
        raw = root["messages"]
        if not isinstance(raw, dict):
            raise InvalidMessageFileError(
                f"The 'messages' property in {source} must be a JSON object containing message definitions."
            )
    else:
        typo = next((key for key in TYPO_KEYS if key in root), None)
        if typo is not None:
            raise InvalidMessageFileError(
                f"Found '{typo}' in {source}. Did you mean 'messages'? "
                'For the full format use {"messages": {...}}; for the simple format '
                "put message codes directly at the root level."
            )
        raw = {key: value for key, value in root.items() if key not in DOCUMENT_KEYS}

    return _convert_entries(raw, source)


def _convert_entries(raw: dict[str, Any], source: str) -> dict[str, MessageTemplate]:
    templates: dict[str, MessageTemplate] = {}
    errors: list[str] = []

    for code, entry in raw.items():
        if code.startswith("_"):
            continue
        if not isinstance(entry, dict):
            errors.append(f"'{code}': expected an object but got {type(entry).__name__}")
            continue
        try:
            templates[code] = MessageTemplate.model_validate(entry)
        except ValidationError as err:
            reasons = "; ".join(e["msg"] for e in err.errors())
            errors.append(f"'{code}': {reasons}")

    if errors and templates:
        logger.warning(
            "%d message(s) in %s could not be parsed:\n%s",
            len(errors),
            source,
            "\n".join(f"  - {e}" for e in errors),
        )

    if not templates:
        details = "\n".join(f"  - {e}" for e in errors) or "  - no message definitions found"
        raise InvalidMessageFileError(f"No valid messages could be parsed from {source}. Errors:\n{details}")

    return templates
