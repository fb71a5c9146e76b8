"""Host URL dialect protocol interface."""

from typing import Protocol, runtime_checkable

from ..models import CloneTarget, RepositoryURI


@runtime_checkable
class HostDialectProtocol(Protocol):
    """Protocol for resolving a host-specific repository URL."""

    @property
    def name(self) -> str:
        """Short identifier for the dialect."""
        ...

    def matches(self, uri: RepositoryURI) -> bool:
        """Return True if this dialect handles the URI."""
        ...

    def resolve(self, uri: RepositoryURI) -> CloneTarget:
        """Translate the URI into a clone URL and optional ref."""
        ...
