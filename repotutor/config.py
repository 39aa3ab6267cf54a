"""Configuration loading for repotutor (.repotutor.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .models import TUTORIAL_FORMATS

CONFIG_FILENAME = ".repotutor.yml"

PROVIDER_KINDS = ("http", "mock", "local")

DEFAULT_SNAPSHOT_ENDPOINT = "http://localhost:8000/repo/snapshot"

ENV_PROVIDER = "REPOTUTOR_PROVIDER"
ENV_SNAPSHOT_URL = "REPOTUTOR_SNAPSHOT_URL"
ENV_TUTORIAL_FORMAT = "REPOTUTOR_TUTORIAL_FORMAT"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed or holds invalid values."""


@dataclass(frozen=True)
class ProviderConfig:
    """Snapshot provider selection and transport settings."""

    kind: str = "http"
    endpoint: str = DEFAULT_SNAPSHOT_ENDPOINT
    timeout: float = 30.0
    fallback_to_mock: bool = True
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TutorialConfig:
    """Document assembler settings."""

    format: str = "journey"


@dataclass(frozen=True)
class RepoTutorConfig:
    """Represents the settings defined in .repotutor.yml."""

    root: Path
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    tutorial: TutorialConfig = field(default_factory=TutorialConfig)


def load_config(
    config_path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> RepoTutorConfig:
    """Load configuration from disk and apply environment overrides."""
    env = os.environ if environ is None else environ
    config_file = _resolve_config_path(config_path or Path.cwd())
    root = config_file.parent.resolve()

    data: Dict[str, Any] = {}
    if config_file.exists():
        data = _read_config(config_file)

    provider_data = _as_dict(data.get("provider"))
    provider = ProviderConfig()
    if provider_data:
        provider = ProviderConfig(
            kind=_as_choice(provider_data.get("kind")) or provider.kind,
            endpoint=_as_str(provider_data.get("endpoint")) or provider.endpoint,
            timeout=_as_float(provider_data.get("timeout"), provider.timeout),
            fallback_to_mock=_as_bool(provider_data.get("fallback_to_mock"), provider.fallback_to_mock),
            headers={
                str(key): str(value)
                for key, value in _as_dict(provider_data.get("headers")).items()
            },
        )

    tutorial_data = _as_dict(data.get("tutorial"))
    tutorial = TutorialConfig()
    if tutorial_data:
        tutorial = TutorialConfig(format=_as_choice(tutorial_data.get("format")) or tutorial.format)

    config = RepoTutorConfig(root=root, provider=provider, tutorial=tutorial)
    config = apply_overrides(
        config,
        provider_kind=env.get(ENV_PROVIDER) or None,
        endpoint=env.get(ENV_SNAPSHOT_URL) or None,
        tutorial_format=env.get(ENV_TUTORIAL_FORMAT) or None,
    )
    return config


def apply_overrides(
    config: RepoTutorConfig,
    *,
    provider_kind: Optional[str] = None,
    endpoint: Optional[str] = None,
    tutorial_format: Optional[str] = None,
) -> RepoTutorConfig:
    """Return a copy of ``config`` with explicit overrides applied and validated."""
    provider = config.provider
    if provider_kind:
        provider = replace(provider, kind=provider_kind.strip().lower())
    if endpoint:
        provider = replace(provider, endpoint=endpoint.strip())

    tutorial = config.tutorial
    if tutorial_format:
        tutorial = replace(tutorial, format=tutorial_format.strip().lower())

    if provider.kind not in PROVIDER_KINDS:
        allowed = ", ".join(PROVIDER_KINDS)
        raise ConfigError(f"Unknown provider kind '{provider.kind}' (expected one of: {allowed})")
    if tutorial.format not in TUTORIAL_FORMATS:
        allowed = ", ".join(TUTORIAL_FORMATS)
        raise ConfigError(f"Unknown tutorial format '{tutorial.format}' (expected one of: {allowed})")
    if provider.timeout <= 0:
        raise ConfigError("provider.timeout must be positive")

    return replace(config, provider=provider, tutorial=tutorial)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_choice(value: Any) -> Optional[str]:
    text = _as_str(value)
    return text.strip().lower() if text else None


def _as_float(value: Any, default: float) -> float:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return default
    return default


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return default


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ProviderConfig",
    "RepoTutorConfig",
    "TutorialConfig",
    "apply_overrides",
    "load_config",
]
