"""Tech-stack and concept detection via substring triggers."""

from __future__ import annotations

from typing import Tuple

from .base import SearchCorpus
from .constants import CONCEPT_TRIGGERS, MAX_CONCEPTS, TECH_STACK_TRIGGERS


def detect_tech_stack(corpus: SearchCorpus) -> Tuple[str, ...]:
    """Return detected technology labels in table order.

    Matching is plain substring containment, so ``reactive.go`` reports React
    and ``package.json`` reports JavaScript.
    """
    return corpus.match_labels(TECH_STACK_TRIGGERS)


def detect_concepts(corpus: SearchCorpus) -> Tuple[str, ...]:
    return corpus.match_labels(CONCEPT_TRIGGERS, limit=MAX_CONCEPTS)


__all__ = ["detect_concepts", "detect_tech_stack"]
