"""Tests for the learning journey builder and assembler dispatch."""

from __future__ import annotations

import json

import pytest

from repotutor.models import AnalysisResult, ModuleInfo, RepositorySnapshot
from repotutor.tutorial import AssemblyError, TutorialAssembler
from repotutor.tutorial.constants import STAGE_ORDER
from repotutor.tutorial.journey import (
    LearningJourneyBuilder,
    build_prerequisites,
    determine_difficulty,
    estimate_duration,
    install_quiz,
)


def _modules(count: int) -> tuple[ModuleInfo, ...]:
    return tuple(ModuleInfo(key=f"m{index}", name=f"Module {index}", purpose="p") for index in range(count))


def test_journey_has_four_stages_in_order(react_snapshot: RepositorySnapshot, react_analysis: AnalysisResult) -> None:
    journey = LearningJourneyBuilder().build(react_snapshot, react_analysis)

    assert tuple(stage.stage_name for stage in journey.learning_path) == STAGE_ORDER
    assert STAGE_ORDER == ("Setup & Run", "Architecture & Core Logic", "Feature Exploration", "Build Your Own")
    for stage in journey.learning_path:
        for question in stage.quiz:
            assert question.answer in question.options


def test_journey_interpolates_analysis(react_snapshot: RepositorySnapshot, react_analysis: AnalysisResult) -> None:
    journey = LearningJourneyBuilder().build(react_snapshot, react_analysis)
    setup, architecture, features, build = journey.learning_path

    assert journey.project_title == "shop"
    assert journey.overview == react_analysis.summary
    assert journey.difficulty_level == "beginner"
    assert journey.estimated_duration == "1-2 hours"
    assert journey.glossary == react_analysis.glossary_terms
    assert setup.quiz[0].answer == "npm install"
    assert "Install dependencies with `npm install`" in setup.steps
    assert architecture.steps[0] == "Open the entry point `src/index.tsx` and read how the app starts"
    assert any("`src/pages/Home.tsx`" in step for step in architecture.steps)
    assert architecture.quiz[0].answer == "src/index.tsx"
    assert architecture.mini_challenge
    assert features.steps[0].startswith("Open the UI Components module (`src/components/Header.tsx`")
    assert features.mini_challenge
    assert build.final_challenge
    assert "Test it with `npm test` and document what you built" in build.steps


def test_empty_analysis_uses_placeholders() -> None:
    journey = LearningJourneyBuilder().build(RepositorySnapshot(), AnalysisResult())
    setup, architecture, features, build = journey.learning_path

    assert journey.project_title == "Repository Learning Journey"
    assert journey.prerequisites == ("Basic programming knowledge", "Git fundamentals")
    assert setup.quiz[0].answer == "Depends on the tech stack"
    assert setup.quiz[0].answer in setup.quiz[0].options
    assert architecture.quiz == ()
    assert architecture.steps[0].startswith("Identify the entry point file")
    assert features.steps[0] == "Choose a main component to modify"
    assert build.final_challenge is not None
    assert len(journey.learning_objectives) == 4


def test_prerequisites_follow_package_manager_and_concepts(react_analysis: AnalysisResult) -> None:
    assert build_prerequisites(react_analysis) == (
        "Basic programming knowledge",
        "Git fundamentals",
        "JavaScript/TypeScript basics",
        "Understanding of component-based architecture",
        "Familiarity with API concepts",
    )
    python = AnalysisResult(package_manager="poetry", main_concepts=("State Management",))
    assert build_prerequisites(python)[2:] == ("Python basics", "State management fundamentals")


@pytest.mark.parametrize(
    ("analysis", "expected"),
    [
        (AnalysisResult(), "beginner"),
        (AnalysisResult(core_modules=_modules(6)), "intermediate"),
        (AnalysisResult(core_modules=_modules(11)), "advanced"),
        (AnalysisResult(main_concepts=("GraphQL",)), "advanced"),
        (AnalysisResult(tech_stack=("Go",)), "advanced"),
    ],
)
def test_difficulty(analysis: AnalysisResult, expected: str) -> None:
    assert determine_difficulty(analysis) == expected


def test_duration_steps() -> None:
    assert estimate_duration(0) == "1-2 hours"
    assert estimate_duration(6) == "2-3 hours"
    assert estimate_duration(11) == "4-6 hours"


def test_install_quiz_options_are_unique() -> None:
    quiz = install_quiz(AnalysisResult())

    assert len(quiz.options) == len(set(quiz.options)) == 4


def test_assembler_dispatches_on_format(react_snapshot: RepositorySnapshot, react_analysis: AnalysisResult) -> None:
    journey_doc = TutorialAssembler("journey").build(react_snapshot, react_analysis)
    markdown_doc = TutorialAssembler("Markdown").build(react_snapshot, react_analysis)

    assert journey_doc.journey is not None and journey_doc.markdown is None
    assert json.loads(journey_doc.render())["learning_path"][0]["stage_name"] == "Setup & Run"
    assert markdown_doc.markdown is not None and markdown_doc.journey is None
    assert markdown_doc.render().startswith("# shop Tutorial")


def test_assembler_rejects_unknown_format(react_snapshot: RepositorySnapshot, react_analysis: AnalysisResult) -> None:
    with pytest.raises(AssemblyError, match="Unsupported tutorial format 'pdf'"):
        TutorialAssembler("pdf").build(react_snapshot, react_analysis)
