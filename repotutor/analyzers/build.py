"""Package manager detection and developer workflow commands."""

from __future__ import annotations

from typing import Sequence

from ..models import DevCommands
from .constants import DEV_COMMANDS, PACKAGE_MANAGER_MARKERS, UNKNOWN


def detect_package_manager(file_tree: Sequence[str]) -> str:
    """Infer the package manager from lockfile markers; first match wins."""
    if not file_tree:
        return UNKNOWN
    joined = " ".join(file_tree).lower()
    for markers, manager in PACKAGE_MANAGER_MARKERS:
        if any(marker in joined for marker in markers):
            return manager
    return UNKNOWN


def infer_dev_commands(package_manager: str) -> DevCommands:
    commands = DEV_COMMANDS.get(package_manager)
    if commands is None:
        return DevCommands(install=UNKNOWN, run=UNKNOWN, test=UNKNOWN)
    install, run, test = commands
    return DevCommands(install=install, run=run, test=test)


__all__ = ["detect_package_manager", "infer_dev_commands"]
