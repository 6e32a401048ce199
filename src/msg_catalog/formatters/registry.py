"""Named formatter registry.

Formatters are registered as zero-argument factories under a
case-insensitive name. The built-ins (json, xml, text, console, log) are
bound to the registry's pipeline and formatter configuration.
"""

import threading
from collections.abc import Callable
from functools import partial

from msg_catalog.errors import FormatterNotFoundError
from msg_catalog.formatters.base import BaseFormatter
from msg_catalog.formatters.console_formatter import ConsoleFormatter
from msg_catalog.formatters.json_formatter import JsonFormatter
from msg_catalog.formatters.log_formatter import LogFormatter
from msg_catalog.formatters.options import FormatterConfiguration, default_formatter_configuration
from msg_catalog.formatters.text_formatter import PlainTextFormatter
from msg_catalog.formatters.xml_formatter import XmlFormatter
from msg_catalog.pipeline import InterceptorPipeline, default_pipeline

FormatterFactory = Callable[[], BaseFormatter]

BUILTIN_FORMATTERS = {
    "json": JsonFormatter,
    "xml": XmlFormatter,
    "text": PlainTextFormatter,
    "console": ConsoleFormatter,
    "log": LogFormatter,
}


class FormatterRegistry:
    """Thread-safe mapping of formatter name to factory."""

    def __init__(
        self,
        pipeline: InterceptorPipeline | None = None,
        configuration: FormatterConfiguration | None = None,
        register_builtins: bool = True,
    ) -> None:
        self._lock = threading.Lock()
        self._factories: dict[str, FormatterFactory] = {}
        self._singletons: dict[str, BaseFormatter] = {}
        self.pipeline = pipeline if pipeline is not None else default_pipeline()
        self.configuration = configuration if configuration is not None else default_formatter_configuration()
        if register_builtins:
            self.register_builtins()

    def _builtin_factories(self) -> dict[str, FormatterFactory]:
        return {
            name: partial(formatter_class, pipeline=self.pipeline, configuration=self.configuration)
            for name, formatter_class in BUILTIN_FORMATTERS.items()
        }

    def register_builtins(self) -> None:
        builtins = self._builtin_factories()
        with self._lock:
            self._factories.update(builtins)
            for name in builtins:
                self._singletons.pop(name, None)

    def register(self, name: str, factory: FormatterFactory) -> None:
        """Register (or replace) the factory for name."""
        if not callable(factory):
            raise TypeError(f"Formatter factory for '{name}' must be callable")
        key = name.strip().lower()
        with self._lock:
            self._factories[key] = factory
            self._singletons.pop(key, None)

    def register_singleton(self, name: str, formatter: BaseFormatter) -> None:
        """Register one shared formatter instance under name."""
        key = name.strip().lower()
        with self._lock:
            self._singletons[key] = formatter
            self._factories[key] = lambda: formatter

    def get(self, name: str) -> BaseFormatter:
        """Return a formatter for name, a new instance unless registered as singleton.

        Raises:
            FormatterNotFoundError: If nothing is registered under name.
        """
        key = name.strip().lower()
        with self._lock:
            singleton = self._singletons.get(key)
            factory = self._factories.get(key)
            available = ", ".join(sorted(self._factories))
        if singleton is not None:
            return singleton
        if factory is None:
            raise FormatterNotFoundError(f"Formatter '{name}' not found. Available: {available}")
        return factory()

    def is_registered(self, name: str) -> bool:
        with self._lock:
            return name.strip().lower() in self._factories

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._factories)

    def clear_custom(self) -> None:
        """Drop every formatter except the built-ins, restoring replaced built-ins."""
        builtins = self._builtin_factories()
        with self._lock:
            self._factories = builtins
            self._singletons = {}

    def clear(self) -> None:
        """Drop every formatter, built-ins included."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()


_default_registry: FormatterRegistry | None = None
_default_lock = threading.Lock()


def default_formatter_registry() -> FormatterRegistry:
    """Return the process-wide formatter registry, creating it on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = FormatterRegistry()
        return _default_registry
