"""Exception types raised by the message catalog.

Every error derives from MessageCatalogError so callers can catch the whole
family; each also derives from the closest builtin so generic handlers
(KeyError, FileNotFoundError, ...) keep working.
"""


class MessageCatalogError(Exception):
    """Base class for all catalog errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class MessageNotFoundError(MessageCatalogError, KeyError):
    """No configured store (nor the bundled defaults) defines the code."""


class FormatterNotFoundError(MessageCatalogError, KeyError):
    """No formatter is registered under the requested name."""


class InvalidMessageFileError(MessageCatalogError, ValueError):
    """A catalog document is malformed or holds no usable messages."""


class ResourceNotFoundError(MessageCatalogError, FileNotFoundError):
    """A file or resource backing a store does not exist."""


class InvalidParameterShapeError(MessageCatalogError, TypeError):
    """Substitution parameters are not a flat mapping of name to value."""


class StoreUnavailableError(MessageCatalogError):
    """A store could not be read (driver error, timeout, unavailable)."""
