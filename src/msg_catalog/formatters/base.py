"""Base formatter: wraps the concrete conversion with the interceptor pipeline.

format() and format_as_object() both run the pipeline's before hooks,
convert the resulting message, then run the after hooks on that same
message (not on the rendered output) and return the conversion result.
"""

from abc import ABC, abstractmethod
from typing import Any

from msg_catalog.formatters.options import (
    FormatterConfiguration,
    FormatterOptions,
    default_formatter_configuration,
)
from msg_catalog.message_model import Message
from msg_catalog.pipeline import InterceptorPipeline, default_pipeline


class BaseFormatter(ABC):
    """Abstract base for message formatters.

    Subclasses implement _format_core (text) and _to_object (structured
    value). Explicit options win over the global configuration, which is
    read at format time so later changes apply to existing formatters.
    """

    def __init__(
        self,
        options: FormatterOptions | None = None,
        pipeline: InterceptorPipeline | None = None,
        configuration: FormatterConfiguration | None = None,
    ) -> None:
        self._options = options
        self.pipeline = pipeline if pipeline is not None else default_pipeline()
        self.configuration = configuration if configuration is not None else default_formatter_configuration()

    @property
    def options(self) -> FormatterOptions:
        return self._options if self._options is not None else self.configuration.options

    def format(self, message: Message) -> str:
        """Render the message as text."""
        prepared = self.pipeline.run_before(message)
        rendered = self._format_core(prepared)
        self.pipeline.run_after(prepared)
        return rendered

    def format_as_object(self, message: Message) -> Any:
        """Render the message as a structured value."""
        prepared = self.pipeline.run_before(message)
        rendered = self._to_object(prepared)
        self.pipeline.run_after(prepared)
        return rendered

    @abstractmethod
    def _format_core(self, message: Message) -> str:
        pass

    @abstractmethod
    def _to_object(self, message: Message) -> Any:
        pass
