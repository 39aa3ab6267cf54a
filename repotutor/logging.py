"""Logging setup shared by the CLI, the HTTP service and the pipeline agents.

Every component logs through ``get_logger`` so records land under the
``repotutor`` hierarchy (``repotutor.agents.RepoCrawler``,
``repotutor.providers.http`` and so on). ``configure_logging`` owns the
handlers on that root; ``uvicorn_log_config`` gives the service's server
loggers the same console format.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Union

ROOT_LOGGER = "repotutor"
CONSOLE_FORMAT = "[repotutor] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

LevelLike = Union[int, str, None]


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``repotutor.<name>``, or the root repotutor logger without a name."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def resolve_level(level: LevelLike = None, *, verbose: bool = False) -> int:
    """Turn a level name or number into a logging level; ``verbose`` means DEBUG."""
    if level is None:
        return logging.DEBUG if verbose else logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def configure_logging(
    *,
    verbose: bool = False,
    level: LevelLike = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Install the console handler (and an optional file sink) on the repotutor root.

    Calling it again replaces the previous handlers, so the CLI and the
    service can both configure logging in one process.
    """
    resolved = resolve_level(level, verbose=verbose)
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(resolved)
    root.propagate = False

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setFormatter(logging.Formatter(FILE_FORMAT))
        root.addHandler(sink)

    return root


def uvicorn_log_config(level: LevelLike = None) -> Dict[str, Any]:
    """dictConfig for uvicorn's loggers that matches the repotutor console format."""
    level_name = logging.getLevelName(resolve_level(level))
    return {
        "version": 1,
        # Keep the repotutor handlers installed by configure_logging.
        "disable_existing_loggers": False,
        "formatters": {
            "repotutor": {"format": CONSOLE_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "repotutor",
            },
        },
        "loggers": {
            "uvicorn": {"handlers": ["console"], "level": level_name, "propagate": False},
            "uvicorn.error": {"level": level_name},
            "uvicorn.access": {"handlers": ["console"], "level": level_name, "propagate": False},
        },
    }


__all__ = [
    "CONSOLE_FORMAT",
    "ROOT_LOGGER",
    "configure_logging",
    "get_logger",
    "resolve_level",
    "uvicorn_log_config",
]
