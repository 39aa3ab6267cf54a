"""Module identification from conventional directory names."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..models import ModuleInfo
from .constants import MAX_KEY_SYMBOLS, MAX_MODULE_FILES, MODULE_FRAGMENTS, SYMBOL_EXTENSIONS


def build_modules(file_tree: Sequence[str]) -> Tuple[ModuleInfo, ...]:
    """Group files under known directory fragments, one module per fragment.

    Output follows the fragment table order, not discovery order.
    """
    files = [path for path in file_tree if not _is_directory(path)]
    modules: List[ModuleInfo] = []
    for fragment, label, purpose in MODULE_FRAGMENTS:
        matches = [path for path in files if _contains_fragment(path, fragment)]
        if not matches:
            continue
        selected = tuple(matches[:MAX_MODULE_FILES])
        modules.append(
            ModuleInfo(
                key=fragment,
                name=label,
                purpose=purpose,
                files=selected,
                key_symbols=extract_key_symbols(selected),
            )
        )
    return tuple(modules)


def extract_key_symbols(files: Sequence[str]) -> Tuple[str, ...]:
    """Derive symbol names from file names: directory and extension stripped."""
    symbols: List[str] = []
    for path in files[:MAX_KEY_SYMBOLS]:
        name = path.replace("\\", "/").rsplit("/", 1)[-1]
        for extension in SYMBOL_EXTENSIONS:
            if name.endswith(extension):
                name = name[: -len(extension)]
                break
        if name:
            symbols.append(name)
    return tuple(symbols)


def _contains_fragment(path: str, fragment: str) -> bool:
    lowered = path.lower()
    return f"/{fragment}/" in lowered or f"\\{fragment}\\" in lowered


def _is_directory(path: str) -> bool:
    return path.endswith(("/", "\\"))


__all__ = ["build_modules", "extract_key_symbols"]
