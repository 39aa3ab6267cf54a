"""Shared building blocks for classifier passes."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from ..models import RepositorySnapshot


class ClassificationError(RuntimeError):
    """Raised when a snapshot cannot be classified."""


@dataclass(frozen=True)
class SearchCorpus:
    """Lower-cased text that all substring predicates are evaluated against."""

    text: str

    @classmethod
    def from_snapshot(cls, snapshot: RepositorySnapshot) -> "SearchCorpus":
        tree = " ".join(snapshot.file_tree)
        key_files = json.dumps(dict(snapshot.key_files), ensure_ascii=False)
        readme = snapshot.readme or ""
        return cls(f"{tree} {key_files} {readme}".lower())

    def contains_any(self, triggers: Iterable[str]) -> bool:
        return any(trigger in self.text for trigger in triggers)

    def match_labels(
        self,
        table: Sequence[Tuple[str, Tuple[str, ...]]],
        *,
        limit: int | None = None,
    ) -> Tuple[str, ...]:
        """Return labels from ``table`` whose triggers occur, in declaration order."""
        labels: List[str] = []
        for label, triggers in table:
            if label in labels:
                continue
            if self.contains_any(triggers):
                labels.append(label)
        if limit is not None:
            return tuple(labels[:limit])
        return tuple(labels)


__all__ = ["ClassificationError", "SearchCorpus"]
