"""Base classes for snapshot providers."""

from abc import ABC, abstractmethod

from ..models import RepositorySnapshot


class ProviderError(RuntimeError):
    """Raised when a snapshot cannot be obtained.

    ``transport`` is set when the failure happened before a response was
    received (connection refused, DNS failure, timeout).
    """

    def __init__(self, message: str, *, transport: bool = False) -> None:
        super().__init__(message)
        self.transport = transport


class SnapshotProvider(ABC):
    """Contract for collaborators that turn a repository URL into a snapshot."""

    name: str = "provider"

    @abstractmethod
    def fetch(self, repo_url: str) -> RepositorySnapshot:
        """Return the snapshot for ``repo_url`` or raise :class:`ProviderError`."""
