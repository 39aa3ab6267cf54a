"""Tests for repotutor.analyzers.CodeAnalyzer."""

from __future__ import annotations

from repotutor.analyzers import CodeAnalyzer
from repotutor.models import AnalysisResult, RepositorySnapshot
from tests._fixtures.snapshots import make_snapshot


def test_empty_snapshot_yields_empty_analysis() -> None:
    result = CodeAnalyzer().analyze(RepositorySnapshot())

    assert result.tech_stack == ()
    assert result.core_modules == ()
    assert result.entry_points == ()
    assert result.main_concepts == ()
    assert result.package_manager == "unknown"
    assert result.summary == "Repository analysis completed."
    assert result.repo_name == "unknown/repo"


def test_analysis_is_idempotent(react_snapshot: RepositorySnapshot) -> None:
    analyzer = CodeAnalyzer()

    first = analyzer.analyze(react_snapshot)
    second = analyzer.analyze(react_snapshot)

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_end_to_end_typescript_scenario() -> None:
    snapshot = make_snapshot(
        ["package.json", "src/index.ts", "src/components/App.tsx"],
        name="demo",
        description="d",
        language="TypeScript",
        stars=5,
        forks=1,
    )

    result = CodeAnalyzer().analyze(snapshot)

    assert "TypeScript" in result.tech_stack
    assert "src/index.ts" in result.entry_points
    components = result.module_named("UI Components")
    assert components is not None
    assert "src/components/App.tsx" in components.files
    assert result.package_manager == "unknown"
    assert result.dev_commands.install == "unknown"
    assert result.dev_commands.run == "unknown"
    assert result.dev_commands.test == "unknown"
    assert result.repo_name == "demo"


def test_react_detected_from_key_file_contents() -> None:
    snapshot = make_snapshot(
        ["package.json", "src/index.js"],
        {"package.json": '{"dependencies": {"React": "18"}}'},
    )

    result = CodeAnalyzer().analyze(snapshot)

    assert "React" in result.tech_stack
    assert "Node.js" in result.tech_stack


def test_react_fixture_analysis(react_analysis: AnalysisResult) -> None:
    assert react_analysis.tech_stack == ("JavaScript", "TypeScript", "React", "Node.js", "Vite")
    assert react_analysis.main_concepts == ("REST API", "Component-based UI", "Authentication")
    assert react_analysis.package_manager == "npm"
    assert react_analysis.dev_commands.install == "npm install"
    assert [module.name for module in react_analysis.core_modules] == [
        "UI Components",
        "Utility Functions",
        "Application Pages",
        "Custom Hooks",
    ]
    assert react_analysis.entry_points == ("src/index.tsx",)
    assert [term.term for term in react_analysis.glossary_terms] == [
        "npm",
        "REST API",
        "Component-based UI",
        "Authentication",
    ]
    assert react_analysis.summary == (
        "shop is a TypeScript project: Storefront demo. "
        "The project uses JavaScript, TypeScript, React, Node.js, Vite. "
        "Key modules include UI Components, Utility Functions, Application Pages."
    )


def test_data_flow_edges_link_entry_pages_and_components(react_analysis: AnalysisResult) -> None:
    edges = [edge.to_dict() for edge in react_analysis.data_flow_edges]

    assert edges == [
        {
            "from": "src/index.tsx",
            "to": "src/pages/Home.tsx",
            "why": "Entry point initializes and renders pages",
        },
        {
            "from": "src/pages/Home.tsx",
            "to": "src/components/Header.tsx",
            "why": "Pages compose and render UI components",
        },
    ]


def test_important_files_follow_tree_order(react_analysis: AnalysisResult) -> None:
    assert [(item.path, item.description) for item in react_analysis.important_files] == [
        ("package.json", "Node.js dependencies and scripts"),
        ("package-lock.json", "npm dependency lockfile"),
        ("README.md", "Project documentation"),
        ("src/index.tsx", "Application entry point"),
    ]


def test_analysis_serialises_snake_case_schema(react_analysis: AnalysisResult) -> None:
    payload = react_analysis.to_dict()

    assert payload["repo_name"] == "shop"
    assert payload["ground_truth_paths"][0] == "package.json"
    assert payload["modules"][0]["key_symbols"] == ["Header", "Footer"]
    assert payload["important_files"][0] == {
        "file": "package.json",
        "description": "Node.js dependencies and scripts",
    }
