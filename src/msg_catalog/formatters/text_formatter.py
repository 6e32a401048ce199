"""Human readable plain text formatter."""

from msg_catalog.formatters.base import BaseFormatter
from msg_catalog.message_model import Message


class PlainTextFormatter(BaseFormatter):
    """Multi-line text, e.g.

        [ERROR] Login failed
        Invalid username or password.

        Time: 2025-11-16 10:47:19
        Code: AUTH_001
    """

    def render_lines(self, message: Message) -> list[str]:
        opts = self.options
        lines = [f"[{message.type.name}] {message.title}", message.description]

        if opts.include_hint and message.hint:
            lines.append(f"Hint: {message.hint}")
        if opts.include_parameters and message.parameters:
            lines.append("Parameters: " + ", ".join(f"{k}={v}" for k, v in message.parameters.items()))
        if opts.include_data and message.data is not None:
            lines.append(f"Data: {message.data}")

        lines.append("")

        if opts.include_timestamp:
            lines.append(f"Time: {message.timestamp:%Y-%m-%d %H:%M:%S}")
        lines.append(f"Code: {message.code}")
        if opts.include_correlation_id and message.correlation_id:
            lines.append(f"Correlation: {message.correlation_id}")
        return lines

    def _format_core(self, message: Message) -> str:
        return "\n".join(self.render_lines(message))

    def _to_object(self, message: Message) -> str:
        return self._format_core(message)
