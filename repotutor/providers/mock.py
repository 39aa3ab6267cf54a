"""Fixed demo snapshot and the transport-failure fallback wrapper."""

from __future__ import annotations

import json

from ..logging import get_logger
from ..models import RepoMetadata, RepositorySnapshot
from .base import ProviderError, SnapshotProvider

_MOCK_README = (
    "# Sample Repository\n\n"
    "This is a mock response from RepoCrawler agent.\n\n"
    "## Features\n"
    "- Feature 1\n"
    "- Feature 2\n"
    "- Feature 3"
)

_MOCK_FILE_TREE = (
    "src/",
    "src/index.js",
    "src/components/",
    "src/components/App.jsx",
    "src/utils/",
    "src/utils/helpers.js",
    "package.json",
    "README.md",
    ".gitignore",
)


def repo_name_from_url(repo_url: str) -> str:
    """Return the last path segment of ``repo_url`` or ``repository``."""
    trimmed = repo_url.strip().rstrip("/")
    if trimmed.endswith(".git"):
        trimmed = trimmed[: -len(".git")]
    name = trimmed.rsplit("/", 1)[-1] if trimmed else ""
    return name or "repository"


class MockSnapshotProvider(SnapshotProvider):
    """Returns a small React demo snapshot named after the requested repository."""

    name = "mock"

    def fetch(self, repo_url: str) -> RepositorySnapshot:
        repo_name = repo_name_from_url(repo_url)
        package_json = json.dumps(
            {
                "name": repo_name,
                "version": "1.0.0",
                "dependencies": {"react": "^18.0.0", "react-dom": "^18.0.0"},
            },
            indent=2,
        )
        return RepositorySnapshot(
            readme=_MOCK_README,
            file_tree=_MOCK_FILE_TREE,
            key_files={
                "package.json": package_json,
                "src/index.js": 'console.log("Hello World");',
            },
            metadata=RepoMetadata(
                name=repo_name,
                description="A sample repository for demonstration",
                primary_language="JavaScript",
                star_count=42,
                fork_count=7,
            ),
        )


class FallbackSnapshotProvider(SnapshotProvider):
    """Delegates to ``primary`` and substitutes ``fallback`` on transport failures only."""

    def __init__(self, primary: SnapshotProvider, fallback: SnapshotProvider | None = None) -> None:
        self.primary = primary
        self.fallback = fallback or MockSnapshotProvider()
        self.name = f"{primary.name}+{self.fallback.name}"
        self.logger = get_logger("providers.fallback")

    def fetch(self, repo_url: str) -> RepositorySnapshot:
        try:
            return self.primary.fetch(repo_url)
        except ProviderError as exc:
            if not exc.transport:
                raise
            self.logger.warning("%s; using %s snapshot data", exc, self.fallback.name)
            return self.fallback.fetch(repo_url)


__all__ = ["FallbackSnapshotProvider", "MockSnapshotProvider", "repo_name_from_url"]
