"""Formatter output options and the global default configuration."""

import threading
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FormatterOptions(BaseModel):
    """Which optional fields a formatter emits."""

    model_config = ConfigDict(extra="forbid")

    include_timestamp: bool = Field(True, description="Emit the resolution timestamp")
    include_correlation_id: bool = Field(True, description="Emit the correlation id when set")
    include_http_status_code: bool = Field(True, description="Emit httpStatusCode in metadata")
    include_metadata: bool = Field(True, description="Emit the metadata section")
    include_data: bool = Field(True, description="Emit the data payload when set")
    include_parameters: bool = Field(True, description="Emit substitution parameters when set")
    include_hint: bool = Field(True, description="Emit the hint when set")
    include_null_fields: bool = Field(False, description="Emit unset optional fields as null")

    @classmethod
    def default(cls) -> "FormatterOptions":
        return cls()

    @classmethod
    def minimal(cls) -> "FormatterOptions":
        """Only essential fields; the data payload is kept."""
        return cls(
            include_timestamp=False,
            include_correlation_id=False,
            include_http_status_code=False,
            include_metadata=False,
            include_parameters=False,
            include_hint=False,
        )

    @classmethod
    def verbose(cls) -> "FormatterOptions":
        return cls(include_null_fields=True)

    @classmethod
    def debug(cls) -> "FormatterOptions":
        return cls(include_null_fields=True)

    @classmethod
    def production_safe(cls) -> "FormatterOptions":
        """Leaves out metadata, data and parameters, which may hold sensitive values."""
        return cls(include_metadata=False, include_data=False, include_parameters=False)

    @classmethod
    def api_client(cls) -> "FormatterOptions":
        return cls(
            include_timestamp=False,
            include_correlation_id=False,
            include_metadata=False,
            include_parameters=False,
        )

    @classmethod
    def logging(cls) -> "FormatterOptions":
        return cls(include_data=False, include_hint=False)


PRESETS = {
    "default": FormatterOptions.default,
    "minimal": FormatterOptions.minimal,
    "verbose": FormatterOptions.verbose,
    "debug": FormatterOptions.debug,
    "production_safe": FormatterOptions.production_safe,
    "api_client": FormatterOptions.api_client,
    "logging": FormatterOptions.logging,
}


def preset(name: str) -> FormatterOptions:
    """Return a fresh copy of the named preset."""
    key = name.strip().lower().replace("-", "_")
    if key not in PRESETS:
        raise ValueError(f"Unknown formatter preset: {name}. Valid presets are: {', '.join(PRESETS)}")
    return PRESETS[key]()


class FormatterConfiguration:
    """Thread-safe holder of the options formatters use when given none."""

    def __init__(self, options: FormatterOptions | None = None) -> None:
        self._lock = threading.Lock()
        self._options = options or FormatterOptions()

    @property
    def options(self) -> FormatterOptions:
        with self._lock:
            return self._options

    def set_options(self, options: FormatterOptions) -> None:
        if options is None:
            raise TypeError("options must not be None")
        with self._lock:
            self._options = options

    def configure(self, **changes: Any) -> FormatterOptions:
        """Replace selected fields, e.g. configure(include_metadata=False)."""
        with self._lock:
            self._options = FormatterOptions.model_validate({**self._options.model_dump(), **changes})
            return self._options

    def reset(self) -> None:
        with self._lock:
            self._options = FormatterOptions()


_default_configuration = FormatterConfiguration()


def default_formatter_configuration() -> FormatterConfiguration:
    return _default_configuration
