"""Snapshot provider that walks a repository checkout on the local filesystem."""

from __future__ import annotations

import os
from collections import Counter
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence

from ..analyzers.constants import ENTRY_POINT_PATTERNS, WELL_KNOWN_FILES
from ..logging import get_logger
from ..models import RepoMetadata, RepositorySnapshot
from .base import ProviderError, SnapshotProvider

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "venv",
    "node_modules",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    ".idea",
    "dist",
    "build",
}

_EXCLUDED_FILES = {
    ".DS_Store",
    "Thumbs.db",
}

_LANGUAGE_BY_SUFFIX = {
    ".py": "Python",
    ".js": "JavaScript",
    ".jsx": "JavaScript",
    ".mjs": "JavaScript",
    ".ts": "TypeScript",
    ".tsx": "TypeScript",
    ".vue": "Vue",
    ".java": "Java",
    ".kt": "Kotlin",
    ".go": "Go",
    ".rs": "Rust",
    ".rb": "Ruby",
    ".php": "PHP",
    ".cs": "C#",
    ".c": "C",
    ".cpp": "C++",
    ".cc": "C++",
    ".swift": "Swift",
    ".scala": "Scala",
}

_README_NAMES = ("readme.md", "readme.rst", "readme.txt", "readme")

MAX_KEY_FILES = 20
MAX_KEY_FILE_BYTES = 64 * 1024


@dataclass
class IgnoreRule:
    """Represents an ignore rule parsed from .gitignore."""

    pattern: str
    directory_only: bool
    anchored: bool
    negate: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            if fnmatchcase(rel_path, self.pattern):
                return True
            return self.directory_only and rel_path.startswith(f"{self.pattern}/")

        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def _build_ignore_rule(pattern: str, negate: bool = False) -> IgnoreRule | None:
    pattern = pattern.strip()
    if not pattern:
        return None

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return IgnoreRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        negate=negate,
        has_slash="/" in pattern,
    )


def _parse_gitignore(path: Path) -> List[IgnoreRule]:
    if not path.exists():
        return []

    rules: List[IgnoreRule] = []
    for raw_line in path.read_text(encoding="utf-8", errors="ignore").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        negate = line.startswith("!")
        if negate:
            line = line[1:]
        rule = _build_ignore_rule(line, negate=negate)
        if rule is not None:
            rules.append(rule)
    return rules


def _should_ignore(rel_path: str, is_dir: bool, rules: Sequence[IgnoreRule]) -> bool:
    ignored = False
    for rule in rules:
        if rule.matches(rel_path, is_dir):
            ignored = not rule.negate
    return ignored


def _iter_files(root: Path, rules: Sequence[IgnoreRule]) -> Iterator[str]:
    for dirpath, dirnames, filenames in os.walk(root):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

        kept_dirs = []
        for name in sorted(dirnames):
            if name in _EXCLUDED_DIRS:
                continue
            rel_path = f"{rel_dir}/{name}" if rel_dir else name
            if _should_ignore(rel_path, True, rules):
                continue
            kept_dirs.append(name)
        dirnames[:] = kept_dirs

        for filename in sorted(filenames):
            if filename in _EXCLUDED_FILES:
                continue
            rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
            if _should_ignore(rel_path, False, rules):
                continue
            yield rel_path


def _is_key_file(rel_path: str) -> bool:
    basename = rel_path.rsplit("/", 1)[-1].lower()
    if basename in WELL_KNOWN_FILES:
        return True
    lowered = rel_path.lower()
    return any(pattern in lowered for pattern in ENTRY_POINT_PATTERNS)


def _read_text(path: Path, *, max_bytes: int) -> Optional[str]:
    try:
        if path.stat().st_size > max_bytes:
            return None
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def _primary_language(paths: Sequence[str]) -> str:
    counts = Counter(
        _LANGUAGE_BY_SUFFIX[suffix]
        for suffix in (Path(path).suffix.lower() for path in paths)
        if suffix in _LANGUAGE_BY_SUFFIX
    )
    if not counts:
        return ""
    return counts.most_common(1)[0][0]


def _find_readme(file_tree: List[str]) -> Optional[str]:
    top_level = {path.lower(): path for path in file_tree if "/" not in path}
    for candidate in _README_NAMES:
        if candidate in top_level:
            return top_level[candidate]
    return None


def _describe_from_readme(readme: Optional[str]) -> str:
    if not readme:
        return ""
    for line in readme.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith(("#", "!", "[", "<", "=", "-")):
            return stripped[:200]
    return ""


class LocalSnapshotProvider(SnapshotProvider):
    """Builds a snapshot from a directory: tree, README, manifests and entry files."""

    name = "local"

    def __init__(self, *, max_key_files: int = MAX_KEY_FILES, max_key_file_bytes: int = MAX_KEY_FILE_BYTES) -> None:
        self.max_key_files = max_key_files
        self.max_key_file_bytes = max_key_file_bytes
        self.logger = get_logger("providers.local")

    def fetch(self, repo_url: str) -> RepositorySnapshot:
        root = Path(repo_url).expanduser()
        if not root.exists():
            raise ProviderError(f"Repository path not found: {repo_url}")
        if not root.is_dir():
            raise ProviderError(f"Repository path is not a directory: {repo_url}")
        root = root.resolve()

        rules = _parse_gitignore(root / ".gitignore")
        file_tree = list(_iter_files(root, rules))
        self.logger.info("Scanned %d files under %s", len(file_tree), root)

        key_files: Dict[str, str] = {}
        for rel_path in file_tree:
            if len(key_files) >= self.max_key_files:
                break
            if not _is_key_file(rel_path):
                continue
            content = _read_text(root / rel_path, max_bytes=self.max_key_file_bytes)
            if content is not None:
                key_files[rel_path] = content

        readme: Optional[str] = None
        readme_path = _find_readme(file_tree)
        if readme_path is not None:
            readme = _read_text(root / readme_path, max_bytes=self.max_key_file_bytes)

        metadata = RepoMetadata(
            name=root.name,
            description=_describe_from_readme(readme),
            primary_language=_primary_language(file_tree),
        )
        return RepositorySnapshot(
            readme=readme,
            file_tree=tuple(file_tree),
            key_files=key_files,
            metadata=metadata,
        )


__all__ = ["IgnoreRule", "LocalSnapshotProvider"]
