"""Glossary entries for the detected package manager and concepts."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..models import GlossaryTerm
from .constants import CONCEPT_TERMS, PACKAGE_MANAGER_TERMS


def generate_glossary(package_manager: str, concepts: Sequence[str]) -> Tuple[GlossaryTerm, ...]:
    terms: List[GlossaryTerm] = []

    entry = PACKAGE_MANAGER_TERMS.get(package_manager)
    if entry is not None:
        terms.append(_term(package_manager, entry))

    for concept in concepts:
        entry = CONCEPT_TERMS.get(concept)
        if entry is None:
            continue
        terms.append(_term(concept, entry))

    return tuple(terms)


def _term(name: str, entry: Tuple[str, str, str]) -> GlossaryTerm:
    definition, when_to_use, pitfall = entry
    return GlossaryTerm(term=name, definition=definition, when_to_use=when_to_use, pitfall=pitfall)


__all__ = ["generate_glossary"]
