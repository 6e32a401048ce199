"""Abstract base for message template stores.

A store reads code -> template definitions from one physical source
(bundled resource, file, in-memory mapping, database). Implementations
provide load; try_load wraps it in a LoadResult so the merge engine can
report a bad source without aborting the whole merge.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from msg_catalog.errors import (
    InvalidMessageFileError,
    ResourceNotFoundError,
    StoreUnavailableError,
)
from msg_catalog.templates import MessageTemplate


class StoreFailure(BaseModel):
    """Why a store produced no templates during a merge."""

    model_config = ConfigDict(frozen=True)

    store: str = Field(..., description="Display name of the failing store")
    kind: str = Field(..., description="unavailable, invalid_file, not_found, timeout or error")
    message: str = Field(..., description="Human readable reason")


class LoadResult(BaseModel):
    """Either the templates a store loaded or the reason it failed."""

    model_config = ConfigDict(frozen=True)

    templates: dict[str, MessageTemplate] = Field(default_factory=dict)
    failure: StoreFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def failure_kind(error: Exception) -> str:
    """Map an exception raised by a store to a StoreFailure kind."""
    if isinstance(error, InvalidMessageFileError):
        return "invalid_file"
    if isinstance(error, ResourceNotFoundError):
        return "not_found"
    if isinstance(error, StoreUnavailableError):
        return "unavailable"
    return "error"


class StoreBase(ABC):
    """Abstract base class for template stores.

    Loading is a one-shot read producing a snapshot. Stores never cache; the
    registry owns caching.
    """

    @property
    def name(self) -> str:
        """Display name used in logs and failure reports."""
        return type(self).__name__

    @abstractmethod
    def load(self) -> dict[str, MessageTemplate]:
        """Read every template from the source. Raise a MessageCatalogError on failure."""
        pass

    def is_available(self) -> bool:
        """Return False when the source is known to be unreachable without trying to load it."""
        return True

    def try_load(self) -> LoadResult:
        """Load and return a LoadResult instead of raising."""
        if not self.is_available():
            return LoadResult(
                failure=StoreFailure(store=self.name, kind="unavailable", message=f"{self.name} is not available")
            )
        try:
            return LoadResult(templates=self.load())
        except Exception as err:
            return LoadResult(failure=StoreFailure(store=self.name, kind=failure_kind(err), message=str(err)))

    def __repr__(self) -> str:
        return f"{self.name}()"
