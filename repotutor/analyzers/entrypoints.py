"""Entry-point detection from conventional file names."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .constants import ENTRY_POINT_PATTERNS, MAX_ENTRY_POINTS


def find_entry_points(file_tree: Sequence[str]) -> Tuple[str, ...]:
    entries: List[str] = []
    for path in file_tree:
        lowered = path.lower()
        for pattern in ENTRY_POINT_PATTERNS:
            if pattern in lowered:
                entries.append(path)
                break
        if len(entries) >= MAX_ENTRY_POINTS:
            break
    return tuple(entries)


__all__ = ["find_entry_points"]
