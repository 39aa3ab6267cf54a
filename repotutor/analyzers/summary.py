"""Important-file selection and the one-paragraph repository summary."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence, Tuple

from ..models import ImportantFile, ModuleInfo, RepoMetadata
from .constants import (
    ENTRY_POINT_DESCRIPTION,
    KEY_FILE_DESCRIPTION,
    MAX_IMPORTANT_FILES,
    SUMMARY_FALLBACK,
    SUMMARY_MODULE_LIMIT,
    SUMMARY_TECH_LIMIT,
    WELL_KNOWN_FILES,
)


def select_important_files(
    file_tree: Sequence[str],
    key_files: Mapping[str, str],
    entry_points: Sequence[str],
) -> Tuple[ImportantFile, ...]:
    """Pick well-known project files, entry points and key files in tree order."""
    entry_set = set(entry_points)
    selected: List[ImportantFile] = []
    seen: set[str] = set()

    def add(path: str, description: str) -> None:
        if path in seen or len(selected) >= MAX_IMPORTANT_FILES:
            return
        seen.add(path)
        selected.append(ImportantFile(path=path, description=description))

    for path in file_tree:
        if path.endswith(("/", "\\")):
            continue
        basename = path.replace("\\", "/").rsplit("/", 1)[-1].lower()
        if basename in WELL_KNOWN_FILES:
            add(path, WELL_KNOWN_FILES[basename])
        elif path in entry_set:
            add(path, ENTRY_POINT_DESCRIPTION)
        elif path in key_files:
            add(path, KEY_FILE_DESCRIPTION)

    return tuple(selected)


def build_summary(
    metadata: Optional[RepoMetadata],
    tech_stack: Sequence[str],
    modules: Sequence[ModuleInfo],
) -> str:
    parts: List[str] = []

    if metadata is not None and metadata.name:
        language = metadata.primary_language or "software"
        clause = f"{metadata.name} is a {language} project"
        if metadata.description:
            clause += f": {metadata.description}"
        parts.append(f"{clause}. ")

    if tech_stack:
        parts.append(f"The project uses {', '.join(tech_stack[:SUMMARY_TECH_LIMIT])}. ")

    if modules:
        names = ", ".join(module.name for module in modules[:SUMMARY_MODULE_LIMIT])
        parts.append(f"Key modules include {names}. ")

    summary = "".join(parts).strip()
    return summary or SUMMARY_FALLBACK


__all__ = ["build_summary", "select_important_files"]
