"""Tutorial document assembly."""

from __future__ import annotations

from pathlib import Path

from ..logging import get_logger
from ..models import (
    FORMAT_JOURNEY,
    FORMAT_MARKDOWN,
    TUTORIAL_FORMATS,
    AnalysisResult,
    RepositorySnapshot,
    TutorialDocument,
)
from .journey import LearningJourneyBuilder
from .markdown import MarkdownTutorialBuilder


class AssemblyError(RuntimeError):
    """Raised when a tutorial document cannot be assembled."""


class TutorialAssembler:
    """Dispatches to the Markdown or learning-journey builder."""

    def __init__(self, format: str = FORMAT_JOURNEY, *, templates_dir: Path | None = None) -> None:
        self.format = (format or "").strip().lower()
        self.templates_dir = templates_dir
        self.logger = get_logger("tutorial")

    def build(self, snapshot: RepositorySnapshot, analysis: AnalysisResult) -> TutorialDocument:
        if self.format not in TUTORIAL_FORMATS:
            raise AssemblyError(
                f"Unsupported tutorial format '{self.format}'. Expected one of: {', '.join(TUTORIAL_FORMATS)}"
            )
        if self.format == FORMAT_MARKDOWN:
            markdown = MarkdownTutorialBuilder(self.templates_dir).build(snapshot, analysis)
            self.logger.debug("Rendered Markdown tutorial (%d characters)", len(markdown))
            return TutorialDocument(format=FORMAT_MARKDOWN, markdown=markdown)

        journey = LearningJourneyBuilder().build(snapshot, analysis)
        self.logger.debug(
            "Built learning journey with %d stages (%s)",
            len(journey.learning_path),
            journey.difficulty_level,
        )
        return TutorialDocument(format=FORMAT_JOURNEY, journey=journey)


__all__ = [
    "AssemblyError",
    "LearningJourneyBuilder",
    "MarkdownTutorialBuilder",
    "TutorialAssembler",
]
