"""XML formatter built on ElementTree."""

import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from msg_catalog.formatters.base import BaseFormatter
from msg_catalog.message_model import Message


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return "" if value is None else str(value)


_XML_NAME = re.compile(r"[A-Za-z_][\w.-]*\Z", re.ASCII)


def _is_xml_name(key: str) -> bool:
    return bool(_XML_NAME.match(key)) and not key.lower().startswith("xml")


def _add_children(parent: ET.Element, values: Mapping[str, Any]) -> None:
    """Keys that are not valid element names become <item key="...">."""
    for key, value in values.items():
        key = str(key)
        if _is_xml_name(key):
            child = ET.SubElement(parent, key)
        else:
            child = ET.SubElement(parent, "item", {"key": key})
        if isinstance(value, Mapping):
            _add_children(child, value)
        else:
            child.text = _text(value)


class XmlFormatter(BaseFormatter):
    """Renders <message code=".." type=".." success=".."> with child elements.

    format_as_object returns the root ET.Element.
    """

    def _format_core(self, message: Message) -> str:
        return ET.tostring(self._to_object(message), encoding="unicode")

    def _to_object(self, message: Message) -> ET.Element:
        opts = self.options
        root = ET.Element(
            "message",
            {
                "code": message.code,
                "type": message.type.value,
                "success": _text(message.is_success),
            },
        )

        if opts.include_timestamp:
            root.set("timestamp", message.timestamp.isoformat())
        if opts.include_correlation_id and message.correlation_id:
            root.set("correlationId", message.correlation_id)

        ET.SubElement(root, "title").text = message.title
        ET.SubElement(root, "description").text = message.description

        if opts.include_hint and message.hint:
            ET.SubElement(root, "hint").text = message.hint

        if opts.include_parameters and message.parameters:
            _add_children(ET.SubElement(root, "parameters"), message.parameters)

        if opts.include_data and message.data is not None:
            data = message.data
            if isinstance(data, BaseModel):
                data = data.model_dump(mode="json")
            element = ET.SubElement(root, "data")
            if isinstance(data, Mapping):
                _add_children(element, data)
            else:
                element.text = _text(data)

        if opts.include_metadata:
            metadata = ET.Element("metadata")
            if opts.include_http_status_code and message.http_status_code is not None:
                ET.SubElement(metadata, "httpStatusCode").text = _text(message.http_status_code)
            _add_children(metadata, message.metadata)
            if len(metadata):
                root.append(metadata)

        return root
