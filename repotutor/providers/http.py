"""Snapshot provider backed by an HTTP snapshot endpoint."""

from __future__ import annotations

import json
from typing import Dict, Mapping, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode, urlsplit, urlunsplit
from urllib.request import Request, urlopen

from ..logging import get_logger
from ..models import RepositorySnapshot
from .base import ProviderError, SnapshotProvider


class HttpSnapshotProvider(SnapshotProvider):
    """Calls ``GET {endpoint}?url={repo_url}`` and parses the JSON snapshot."""

    name = "http"

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: Optional[float] = 30.0,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self.headers: Dict[str, str] = {"Accept": "application/json"}
        if headers:
            self.headers.update(headers)
        self.logger = get_logger("providers.http")

    def build_url(self, repo_url: str) -> str:
        parts = urlsplit(self.endpoint)
        query = urlencode({"url": repo_url})
        if parts.query:
            query = f"{parts.query}&{query}"
        return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))

    def fetch(self, repo_url: str) -> RepositorySnapshot:
        url = self.build_url(repo_url)
        self.logger.info("Requesting snapshot from %s", url)
        request = Request(url, headers=self.headers, method="GET")

        try:
            with urlopen(request, timeout=self.timeout) as response:  # type: ignore[arg-type]
                raw = response.read()
        except HTTPError as exc:
            reason = exc.reason if isinstance(exc.reason, str) else str(exc.reason)
            raise ProviderError(f"Snapshot endpoint returned {exc.code}: {reason}") from exc
        except URLError as exc:
            raise ProviderError(f"Snapshot endpoint unreachable: {exc.reason}", transport=True) from exc
        except (TimeoutError, ConnectionError) as exc:
            raise ProviderError(f"Snapshot endpoint unreachable: {exc}", transport=True) from exc

        try:
            payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ProviderError("Snapshot endpoint returned invalid JSON") from exc

        if not isinstance(payload, dict):
            raise ProviderError("Snapshot endpoint returned a non-object payload")

        snapshot = RepositorySnapshot.from_dict(payload)
        self.logger.debug("Snapshot contains %d paths and %d key files", len(snapshot.file_tree), len(snapshot.key_files))
        return snapshot


__all__ = ["HttpSnapshotProvider"]
