"""Pipeline agents wrapping the provider, classifier and assembler."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

from .analyzers import ClassificationError, CodeAnalyzer
from .logging import get_logger
from .models import AnalysisResult, RepositorySnapshot, StepResult
from .providers import ProviderError, SnapshotProvider
from .tutorial import AssemblyError, TutorialAssembler

UNKNOWN_ERROR = "Unknown error"

REPO_CRAWLER = "RepoCrawler"
CODE_ANALYZER = "CodeAnalyzer"
TEACHER = "Teacher"


def error_message(exc: BaseException) -> str:
    """Return ``str(exc)`` or a placeholder when the exception carries no message."""
    return str(exc) or UNKNOWN_ERROR


class Agent(ABC):
    """A single pipeline step with a display name and role."""

    name: str = "Agent"
    role: str = ""

    def __init__(self) -> None:
        self.logger = get_logger(f"agents.{self.name}")

    def describe(self) -> Dict[str, str]:
        return {"name": self.name, "role": self.role, "status": "active"}

    def _failed(self, exc: BaseException) -> StepResult:
        message = error_message(exc)
        self.logger.error("%s failed: %s", self.name, message)
        return StepResult.failed(self.name, message)

    @abstractmethod
    def execute(self, *args: Any) -> StepResult:
        """Run the step and report its outcome."""


class RepoCrawlerAgent(Agent):
    name = REPO_CRAWLER
    role = "Fetch repository snapshot from the snapshot provider"

    def __init__(self, provider: SnapshotProvider) -> None:
        super().__init__()
        self.provider = provider

    def execute(self, repo_url: str) -> StepResult:
        self.logger.info("Fetching snapshot for %s via %s provider", repo_url, self.provider.name)
        try:
            snapshot = self.provider.fetch(repo_url)
        except ProviderError as exc:
            return self._failed(exc)
        self.logger.info("Fetched snapshot with %d paths", len(snapshot.file_tree))
        return StepResult.ok(self.name, snapshot)


class CodeAnalyzerAgent(Agent):
    name = CODE_ANALYZER
    role = "Analyze repository structure and content"

    def __init__(self, analyzer: CodeAnalyzer | None = None) -> None:
        super().__init__()
        self.analyzer = analyzer or CodeAnalyzer()

    def execute(self, snapshot: RepositorySnapshot) -> StepResult:
        self.logger.info("Analyzing repository structure")
        try:
            analysis = self.analyzer.analyze(snapshot)
        except ClassificationError as exc:
            return self._failed(exc)
        self.logger.info(
            "Detected %d technologies and %d modules",
            len(analysis.tech_stack),
            len(analysis.core_modules),
        )
        return StepResult.ok(self.name, analysis)


class TeacherAgent(Agent):
    name = TEACHER
    role = "Generate interactive learning journeys"

    def __init__(self, assembler: TutorialAssembler | None = None) -> None:
        super().__init__()
        self.assembler = assembler or TutorialAssembler()

    def execute(self, snapshot: RepositorySnapshot, analysis: AnalysisResult) -> StepResult:
        self.logger.info("Assembling %s tutorial", self.assembler.format)
        try:
            document = self.assembler.build(snapshot, analysis)
        except AssemblyError as exc:
            return self._failed(exc)
        self.logger.info("Tutorial assembled")
        return StepResult.ok(self.name, document)


__all__ = [
    "Agent",
    "CODE_ANALYZER",
    "CodeAnalyzerAgent",
    "REPO_CRAWLER",
    "RepoCrawlerAgent",
    "TEACHER",
    "TeacherAgent",
    "UNKNOWN_ERROR",
    "error_message",
]
