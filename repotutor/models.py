"""Core data models shared across repotutor components."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple


@dataclass(frozen=True)
class RepoMetadata:
    """Descriptive metadata reported for a repository."""

    name: str = ""
    description: str = ""
    primary_language: str = ""
    star_count: int = 0
    fork_count: int = 0

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RepoMetadata":
        return cls(
            name=_as_text(payload.get("name")),
            description=_as_text(payload.get("description")),
            primary_language=_as_text(
                _first_present(payload, "primary_language", "primaryLanguage", "language")
            ),
            star_count=_as_count(_first_present(payload, "star_count", "starCount", "stars")),
            fork_count=_as_count(_first_present(payload, "fork_count", "forkCount", "forks")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "language": self.primary_language,
            "stars": self.star_count,
            "forks": self.fork_count,
        }


@dataclass(frozen=True)
class RepositorySnapshot:
    """Static bundle describing a repository: tree, selected contents, README and metadata."""

    readme: Optional[str] = None
    file_tree: Tuple[str, ...] = ()
    key_files: Mapping[str, str] = field(default_factory=dict)
    metadata: Optional[RepoMetadata] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RepositorySnapshot":
        """Build a snapshot from the snapshot endpoint's JSON payload.

        Both the camelCase wire format (``fileTree``/``keyFiles``) and the
        snake_case form are accepted. Malformed members degrade to empty values.
        """
        readme = payload.get("readme")
        tree = _first_present(payload, "file_tree", "fileTree")
        files = _first_present(payload, "key_files", "keyFiles")
        metadata = payload.get("metadata")

        file_tree: Tuple[str, ...] = ()
        if isinstance(tree, (list, tuple)):
            file_tree = tuple(item for item in tree if isinstance(item, str))

        key_files: Dict[str, str] = {}
        if isinstance(files, dict):
            key_files = {
                str(path): content for path, content in files.items() if isinstance(content, str)
            }

        return cls(
            readme=readme if isinstance(readme, str) else None,
            file_tree=file_tree,
            key_files=key_files,
            metadata=RepoMetadata.from_dict(metadata) if isinstance(metadata, dict) else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "fileTree": list(self.file_tree),
            "keyFiles": dict(self.key_files),
        }
        if self.readme is not None:
            payload["readme"] = self.readme
        if self.metadata is not None:
            payload["metadata"] = self.metadata.to_dict()
        return payload


@dataclass(frozen=True)
class ModuleInfo:
    """A group of files identified by a conventional directory fragment."""

    key: str
    name: str
    purpose: str
    files: Tuple[str, ...] = ()
    key_symbols: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "files": list(self.files),
            "purpose": self.purpose,
            "key_symbols": list(self.key_symbols),
        }


def find_module(modules: Sequence[ModuleInfo], fragment: str) -> Optional[ModuleInfo]:
    """Return the first module whose label contains ``fragment`` (case-insensitive)."""
    needle = fragment.lower()
    for module in modules:
        if needle in module.name.lower():
            return module
    return None


@dataclass(frozen=True)
class ImportantFile:
    path: str
    description: str


@dataclass(frozen=True)
class DevCommands:
    install: str = "unknown"
    run: str = "unknown"
    test: str = "unknown"

    @property
    def known(self) -> bool:
        return self.install != "unknown"


@dataclass(frozen=True)
class DataFlowEdge:
    """Directed edge between two files with the rationale for the link."""

    source: str
    target: str
    reason: str

    def to_dict(self) -> Dict[str, str]:
        return {"from": self.source, "to": self.target, "why": self.reason}


@dataclass(frozen=True)
class GlossaryTerm:
    term: str
    definition: str
    when_to_use: str
    pitfall: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "term": self.term,
            "definition": self.definition,
            "when_to_use": self.when_to_use,
            "pitfall": self.pitfall,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Structured output of the classifier, consumed once by the assembler."""

    repo_name: str = "unknown/repo"
    tech_stack: Tuple[str, ...] = ()
    core_modules: Tuple[ModuleInfo, ...] = ()
    important_files: Tuple[ImportantFile, ...] = ()
    entry_points: Tuple[str, ...] = ()
    package_manager: str = "unknown"
    dev_commands: DevCommands = field(default_factory=DevCommands)
    main_concepts: Tuple[str, ...] = ()
    data_flow_edges: Tuple[DataFlowEdge, ...] = ()
    glossary_terms: Tuple[GlossaryTerm, ...] = ()
    summary: str = ""
    ground_truth_paths: Tuple[str, ...] = ()

    def module_named(self, fragment: str) -> Optional[ModuleInfo]:
        """Return the first module whose label contains ``fragment`` (case-insensitive)."""
        return find_module(self.core_modules, fragment)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "repo_name": self.repo_name,
            "package_manager": self.package_manager,
            "dev_commands": {
                "install": self.dev_commands.install,
                "run": self.dev_commands.run,
                "test": self.dev_commands.test,
            },
            "tech_stack": list(self.tech_stack),
            "entry_points": list(self.entry_points),
            "main_concepts": list(self.main_concepts),
            "modules": [module.to_dict() for module in self.core_modules],
            "important_files": [
                {"file": item.path, "description": item.description}
                for item in self.important_files
            ],
            "data_flow_edges": [edge.to_dict() for edge in self.data_flow_edges],
            "explain_terms": [term.to_dict() for term in self.glossary_terms],
            "summary": self.summary,
            "ground_truth_paths": list(self.ground_truth_paths),
        }


@dataclass(frozen=True)
class QuizQuestion:
    question: str
    options: Tuple[str, ...]
    answer: str

    def to_dict(self) -> Dict[str, Any]:
        return {"question": self.question, "options": list(self.options), "answer": self.answer}


@dataclass(frozen=True)
class LearningStage:
    """One level of the learning journey."""

    stage_name: str
    goal: str
    concepts: Tuple[str, ...]
    steps: Tuple[str, ...]
    checkpoint: str
    quiz: Tuple[QuizQuestion, ...] = ()
    mini_challenge: Optional[str] = None
    final_challenge: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "stage_name": self.stage_name,
            "goal": self.goal,
            "concepts": list(self.concepts),
            "steps": list(self.steps),
            "checkpoint": self.checkpoint,
        }
        if self.quiz:
            payload["quiz"] = [question.to_dict() for question in self.quiz]
        if self.mini_challenge is not None:
            payload["mini_challenge"] = self.mini_challenge
        if self.final_challenge is not None:
            payload["final_challenge"] = self.final_challenge
        return payload


@dataclass(frozen=True)
class FinalProject:
    goal: str
    description: str
    expected_learning: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "goal": self.goal,
            "description": self.description,
            "expected_learning": list(self.expected_learning),
        }


@dataclass(frozen=True)
class LearningJourney:
    """Structured, stage-based course generated for a repository."""

    project_title: str
    overview: str
    difficulty_level: str
    estimated_duration: str
    prerequisites: Tuple[str, ...]
    learning_objectives: Tuple[str, ...]
    glossary: Tuple[GlossaryTerm, ...]
    learning_path: Tuple[LearningStage, ...]
    final_project: FinalProject

    def to_dict(self) -> Dict[str, Any]:
        return {
            "project_title": self.project_title,
            "overview": self.overview,
            "difficulty_level": self.difficulty_level,
            "estimated_duration": self.estimated_duration,
            "prerequisites": list(self.prerequisites),
            "learning_objectives": list(self.learning_objectives),
            "glossary": [term.to_dict() for term in self.glossary],
            "learning_path": [stage.to_dict() for stage in self.learning_path],
            "final_project": self.final_project.to_dict(),
        }


FORMAT_MARKDOWN = "markdown"
FORMAT_JOURNEY = "journey"
TUTORIAL_FORMATS: Tuple[str, ...] = (FORMAT_JOURNEY, FORMAT_MARKDOWN)


@dataclass(frozen=True)
class TutorialDocument:
    """Final artifact: Markdown text or a learning journey, never both."""

    format: str
    markdown: Optional[str] = None
    journey: Optional[LearningJourney] = None

    def __post_init__(self) -> None:
        if self.format == FORMAT_MARKDOWN and (self.markdown is None or self.journey is not None):
            raise ValueError("Markdown documents carry markdown text only")
        if self.format == FORMAT_JOURNEY and (self.journey is None or self.markdown is not None):
            raise ValueError("Journey documents carry a learning journey only")
        if self.format not in TUTORIAL_FORMATS:
            raise ValueError(f"Unsupported tutorial format: {self.format}")

    def render(self) -> str:
        if self.journey is not None:
            return json.dumps(self.journey.to_dict(), indent=2)
        return self.markdown or ""

    def to_payload(self) -> Any:
        """Return a JSON-compatible value: the Markdown string or the journey mapping."""
        if self.journey is not None:
            return self.journey.to_dict()
        return self.markdown


@dataclass(frozen=True)
class StepResult:
    """Outcome of a single pipeline step."""

    agent_name: str
    success: bool
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, agent_name: str, data: Any) -> "StepResult":
        return cls(agent_name=agent_name, success=True, data=data)

    @classmethod
    def failed(cls, agent_name: str, error: str) -> "StepResult":
        return cls(agent_name=agent_name, success=False, error=error)


@dataclass
class PipelineRunResult:
    """Aggregate result for one tutorial request, built step by step."""

    success: bool = False
    document: Optional[TutorialDocument] = None
    error: Optional[str] = None
    step_results: Dict[str, StepResult] = field(default_factory=dict)

    @property
    def attempted_steps(self) -> List[str]:
        return list(self.step_results)


def _first_present(payload: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_count(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return 0
    return 0
