"""Heuristic repository classifier.

The classifier is a pure function from a :class:`RepositorySnapshot` to an
:class:`AnalysisResult`. Each pass lives in its own module and reads from a
single precomputed lower-case search corpus.
"""

from __future__ import annotations

from ..logging import get_logger
from ..models import AnalysisResult, RepositorySnapshot
from .base import ClassificationError, SearchCorpus
from .build import detect_package_manager, infer_dev_commands
from .constants import RULES_VERSION, UNKNOWN_REPO_NAME
from .entrypoints import find_entry_points
from .flow import infer_data_flow_edges
from .glossary import generate_glossary
from .modules import build_modules
from .summary import build_summary, select_important_files
from .techstack import detect_concepts, detect_tech_stack


class CodeAnalyzer:
    """Maps a snapshot onto tech-stack labels, modules, entry points and commands."""

    def __init__(self) -> None:
        self.logger = get_logger("analyzer")

    def analyze(self, snapshot: RepositorySnapshot) -> AnalysisResult:
        file_tree = tuple(snapshot.file_tree)
        key_files = dict(snapshot.key_files)
        corpus = SearchCorpus.from_snapshot(snapshot)

        tech_stack = detect_tech_stack(corpus)
        concepts = detect_concepts(corpus)
        package_manager = detect_package_manager(file_tree)
        dev_commands = infer_dev_commands(package_manager)
        entry_points = find_entry_points(file_tree)
        modules = build_modules(file_tree)
        edges = infer_data_flow_edges(modules, entry_points)
        glossary = generate_glossary(package_manager, concepts)
        important_files = select_important_files(file_tree, key_files, entry_points)
        summary = build_summary(snapshot.metadata, tech_stack, modules)

        self.logger.debug(
            "Classified %d paths (rules v%d): %d technologies, %d modules, %d entry points, manager=%s",
            len(file_tree),
            RULES_VERSION,
            len(tech_stack),
            len(modules),
            len(entry_points),
            package_manager,
        )

        repo_name = snapshot.metadata.name if snapshot.metadata and snapshot.metadata.name else UNKNOWN_REPO_NAME
        return AnalysisResult(
            repo_name=repo_name,
            tech_stack=tech_stack,
            core_modules=modules,
            important_files=important_files,
            entry_points=entry_points,
            package_manager=package_manager,
            dev_commands=dev_commands,
            main_concepts=concepts,
            data_flow_edges=edges,
            glossary_terms=glossary,
            summary=summary,
            ground_truth_paths=file_tree,
        )


__all__ = [
    "ClassificationError",
    "CodeAnalyzer",
    "SearchCorpus",
]
