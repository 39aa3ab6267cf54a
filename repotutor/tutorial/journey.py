"""Structured learning-journey assembly."""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..models import (
    AnalysisResult,
    FinalProject,
    LearningJourney,
    LearningStage,
    QuizQuestion,
    RepositorySnapshot,
)
from .constants import (
    ADVANCED_CONCEPTS,
    ADVANCED_TECH,
    BASE_PREREQUISITES,
    DIFFICULTY_ADVANCED,
    DIFFICULTY_BEGINNER,
    DIFFICULTY_INTERMEDIATE,
    ENTRY_DISTRACTORS,
    FINAL_PROJECT_DESCRIPTION,
    FINAL_PROJECT_GOAL,
    FINAL_PROJECT_LEARNING,
    INSTALL_DISTRACTORS,
    INSTALL_UNKNOWN_ANSWER,
    LEARNING_OBJECTIVES,
    STAGE_ARCHITECTURE,
    STAGE_BUILD,
    STAGE_FEATURES,
    STAGE_SETUP,
)

_JS_PACKAGE_MANAGERS = ("npm", "yarn", "pnpm")
_PYTHON_PACKAGE_MANAGERS = ("pip", "poetry")


def determine_difficulty(analysis: AnalysisResult) -> str:
    module_count = len(analysis.core_modules)
    if module_count > 10:
        return DIFFICULTY_ADVANCED
    if any(concept in ADVANCED_CONCEPTS for concept in analysis.main_concepts):
        return DIFFICULTY_ADVANCED
    if any(tech in ADVANCED_TECH for tech in analysis.tech_stack):
        return DIFFICULTY_ADVANCED
    if module_count > 5:
        return DIFFICULTY_INTERMEDIATE
    return DIFFICULTY_BEGINNER


def estimate_duration(module_count: int) -> str:
    if module_count > 10:
        return "4-6 hours"
    if module_count > 5:
        return "2-3 hours"
    return "1-2 hours"


def build_prerequisites(analysis: AnalysisResult) -> Tuple[str, ...]:
    """Baseline entries followed by ones implied by the package manager and concepts."""
    prerequisites: List[str] = list(BASE_PREREQUISITES)
    stack = analysis.tech_stack
    concepts = analysis.main_concepts

    if analysis.package_manager in _JS_PACKAGE_MANAGERS or "JavaScript" in stack or "TypeScript" in stack:
        prerequisites.append("JavaScript/TypeScript basics")
    if analysis.package_manager in _PYTHON_PACKAGE_MANAGERS or "Python" in stack:
        prerequisites.append("Python basics")
    if "Component-based UI" in concepts:
        prerequisites.append("Understanding of component-based architecture")
    if "REST API" in concepts or "GraphQL" in concepts:
        prerequisites.append("Familiarity with API concepts")
    if "State Management" in concepts:
        prerequisites.append("State management fundamentals")
    return tuple(prerequisites)


def install_quiz(analysis: AnalysisResult) -> QuizQuestion:
    """Multiple-choice question whose answer is the detected install command."""
    answer = analysis.dev_commands.install if analysis.dev_commands.known else INSTALL_UNKNOWN_ANSWER
    options: List[str] = [answer]
    for candidate in INSTALL_DISTRACTORS:
        if len(options) >= 4:
            break
        if candidate not in options:
            options.append(candidate)
    if answer != INSTALL_UNKNOWN_ANSWER and len(options) < 4:
        options.append(INSTALL_UNKNOWN_ANSWER)
    return QuizQuestion(
        question="Which command installs the dependencies for this project?",
        options=tuple(sorted(options)),
        answer=answer,
    )


def entry_point_quiz(entry_point: str) -> QuizQuestion:
    options = [entry_point] + [candidate for candidate in ENTRY_DISTRACTORS if candidate != entry_point]
    return QuizQuestion(
        question="Which file is the application's entry point?",
        options=tuple(sorted(options)),
        answer=entry_point,
    )


class LearningJourneyBuilder:
    """Builds the four-stage learning journey for a repository."""

    def build(self, snapshot: RepositorySnapshot, analysis: AnalysisResult) -> LearningJourney:
        metadata = snapshot.metadata
        name = metadata.name if metadata else ""
        description = metadata.description if metadata else ""

        return LearningJourney(
            project_title=name or "Repository Learning Journey",
            overview=(
                analysis.summary
                or description
                or "Master this project through hands-on learning and experimentation."
            ),
            difficulty_level=determine_difficulty(analysis),
            estimated_duration=estimate_duration(len(analysis.core_modules)),
            prerequisites=build_prerequisites(analysis),
            learning_objectives=LEARNING_OBJECTIVES,
            glossary=analysis.glossary_terms,
            learning_path=(
                self._setup_stage(analysis),
                self._architecture_stage(analysis),
                self._features_stage(analysis),
                self._build_stage(analysis),
            ),
            final_project=FinalProject(
                goal=FINAL_PROJECT_GOAL,
                description=FINAL_PROJECT_DESCRIPTION,
                expected_learning=FINAL_PROJECT_LEARNING,
            ),
        )

    @staticmethod
    def _setup_stage(analysis: AnalysisResult) -> LearningStage:
        commands = analysis.dev_commands
        if commands.known:
            install_step = f"Install dependencies with `{commands.install}`"
            run_step = f"Start the project with `{commands.run}` and verify it works"
        else:
            install_step = "Install dependencies using the project's package manager"
            run_step = "Run the development server and verify it works"
        return LearningStage(
            stage_name=STAGE_SETUP,
            goal="Get the project running locally",
            concepts=("installation", "dependency management", "environment setup"),
            steps=(
                "Clone the repository to your local machine",
                "Read the README for setup instructions",
                install_step,
                run_step,
            ),
            checkpoint="You can successfully run the project and see the output in your browser or terminal",
            quiz=(install_quiz(analysis),),
        )

    @staticmethod
    def _architecture_stage(analysis: AnalysisResult) -> LearningStage:
        entry_point: Optional[str] = analysis.entry_points[0] if analysis.entry_points else None
        if entry_point:
            entry_step = f"Open the entry point `{entry_point}` and read how the app starts"
        else:
            entry_step = "Identify the entry point file (e.g., index.js, main.py, App.tsx)"

        if analysis.data_flow_edges:
            flow_steps = [
                f"Follow the flow from `{edge.source}` to `{edge.target}`: {edge.reason}"
                for edge in analysis.data_flow_edges
            ]
        else:
            flow_steps = ["Trace the main data flow through the application"]

        quiz: Tuple[QuizQuestion, ...] = (entry_point_quiz(entry_point),) if entry_point else ()
        return LearningStage(
            stage_name=STAGE_ARCHITECTURE,
            goal="Understand how main components interact",
            concepts=("code architecture", "data flow", "component relationships"),
            steps=(
                entry_step,
                *flow_steps,
                "Map out how different modules communicate",
                "Document the architecture in a simple diagram",
            ),
            checkpoint="You can explain the project architecture and main data flow",
            quiz=quiz,
            mini_challenge=(
                "Add a log or print statement in a key function and verify it executes "
                "when you interact with the app."
            ),
        )

    @staticmethod
    def _features_stage(analysis: AnalysisResult) -> LearningStage:
        first_module = analysis.core_modules[0] if analysis.core_modules else None
        if first_module is not None:
            open_step = f"Open the {first_module.name} module"
            if first_module.files:
                files = ", ".join(f"`{path}`" for path in first_module.files)
                open_step = f"{open_step} ({files})"
        else:
            open_step = "Choose a main component to modify"
        return LearningStage(
            stage_name=STAGE_FEATURES,
            goal="Experiment with modifying a core feature",
            concepts=("code modification", "testing changes", "debugging"),
            steps=(
                open_step,
                "Make a small change (e.g., update text, change a color, modify logic)",
                "Run the project and verify your change appears",
                "Use browser DevTools or a debugger to inspect the change",
            ),
            checkpoint="You successfully modified a feature and confirmed the result",
            mini_challenge="Add a new button or function that logs user interaction.",
        )

    @staticmethod
    def _build_stage(analysis: AnalysisResult) -> LearningStage:
        commands = analysis.dev_commands
        if commands.test != "unknown":
            test_step = f"Test it with `{commands.test}` and document what you built"
        else:
            test_step = "Test it thoroughly and document what you built"
        return LearningStage(
            stage_name=STAGE_BUILD,
            goal="Create a small new feature from scratch",
            concepts=("feature implementation", "code organization", "best practices"),
            steps=(
                "Plan a small addition (like a new component, function, or route)",
                "Follow the existing code patterns and conventions",
                "Implement your feature step by step",
                test_step,
            ),
            checkpoint="You build a working mini-feature using what you learned",
            final_challenge=(
                "Build a feature that interacts with existing code "
                "(e.g., a new UI element that uses existing data or a utility function)."
            ),
        )


__all__ = [
    "LearningJourneyBuilder",
    "build_prerequisites",
    "determine_difficulty",
    "estimate_duration",
    "install_quiz",
]
