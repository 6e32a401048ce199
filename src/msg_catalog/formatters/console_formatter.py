"""Terminal formatter: plain text with an icon and ANSI colors."""

from typing import Any

import click

from msg_catalog.formatters.text_formatter import PlainTextFormatter
from msg_catalog.message_model import Message
from msg_catalog.templates import MessageType

ICONS = {
    MessageType.SUCCESS: "✓",
    MessageType.INFO: "ℹ",
    MessageType.WARNING: "⚠",
    MessageType.ERROR: "✗",
    MessageType.CRITICAL: "☠",
}

COLORS = {
    MessageType.SUCCESS: "green",
    MessageType.INFO: "blue",
    MessageType.WARNING: "yellow",
    MessageType.ERROR: "red",
    MessageType.CRITICAL: "bright_red",
}


class ConsoleFormatter(PlainTextFormatter):
    """Plain text prefixed with a type icon, colored by type when use_colors is set."""

    def __init__(self, use_colors: bool = True, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.use_colors = use_colors

    def _format_core(self, message: Message) -> str:
        lines = self.render_lines(message)
        lines[0] = f"{ICONS.get(message.type, '•')} {lines[0]}"
        text = "\n".join(lines)
        if self.use_colors:
            bold = True if message.type is MessageType.CRITICAL else None
            return click.style(text, fg=COLORS.get(message.type), bold=bold)
        return text

    def _to_object(self, message: Message) -> dict[str, Any]:
        return {
            "icon": ICONS.get(message.type, "•"),
            "color": COLORS.get(message.type),
            "message": self._format_core(message),
        }

    def write(self, message: Message) -> None:
        """Print the message; colors are stripped when stdout is not a terminal."""
        click.echo(self.format(message))
