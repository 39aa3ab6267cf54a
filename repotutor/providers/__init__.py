"""Snapshot provider implementations and selection from configuration."""

from __future__ import annotations

from ..config import ConfigError, ProviderConfig
from .base import ProviderError, SnapshotProvider
from .http import HttpSnapshotProvider
from .local import LocalSnapshotProvider
from .mock import FallbackSnapshotProvider, MockSnapshotProvider


def build_provider(config: ProviderConfig) -> SnapshotProvider:
    """Return the provider described by ``config``."""
    kind = config.kind.lower()
    if kind == "mock":
        return MockSnapshotProvider()
    if kind == "local":
        return LocalSnapshotProvider()
    if kind == "http":
        provider: SnapshotProvider = HttpSnapshotProvider(
            config.endpoint,
            timeout=config.timeout,
            headers=config.headers,
        )
        if config.fallback_to_mock:
            provider = FallbackSnapshotProvider(provider, MockSnapshotProvider())
        return provider
    raise ConfigError(f"Unknown provider kind '{config.kind}'")


__all__ = [
    "FallbackSnapshotProvider",
    "HttpSnapshotProvider",
    "LocalSnapshotProvider",
    "MockSnapshotProvider",
    "ProviderError",
    "SnapshotProvider",
    "build_provider",
]
