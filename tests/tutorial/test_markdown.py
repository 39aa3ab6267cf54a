"""Tests for the Markdown tutorial builder."""

from __future__ import annotations

from pathlib import Path

from repotutor.models import AnalysisResult, ImportantFile, ModuleInfo, RepositorySnapshot
from repotutor.tutorial.markdown import (
    MarkdownTutorialBuilder,
    build_preview,
    categorize_tech_stack,
    community_size,
    module_learning_tip,
)
from tests._fixtures.snapshots import make_snapshot


def test_file_without_content_has_heading_but_no_preview() -> None:
    snapshot = make_snapshot(["README.md"], name="demo")
    analysis = AnalysisResult(
        important_files=(ImportantFile(path="README.md", description="Project documentation"),),
    )

    markdown = MarkdownTutorialBuilder().build(snapshot, analysis)

    assert "### `README.md`" in markdown
    assert "Project documentation" in markdown
    assert "```" not in markdown


def test_sections_render_in_fixed_order(react_snapshot: RepositorySnapshot, react_analysis: AnalysisResult) -> None:
    markdown = MarkdownTutorialBuilder().build(react_snapshot, react_analysis)

    headings = [
        "# shop Tutorial",
        "## Overview",
        "## Repository Stats",
        "## Tech Stack",
        "## Core Modules",
        "## File Walkthrough",
        "## Learning Path",
        "## Practice Exercises",
        "## Additional Resources",
        "---",
    ]
    positions = [markdown.index(heading) for heading in headings]
    assert positions == sorted(positions)
    assert markdown.startswith("# shop Tutorial\n")
    assert markdown.rstrip().endswith("before running them.*")
    assert "\n\n\n" not in markdown


def test_key_file_preview_is_truncated(react_snapshot: RepositorySnapshot, react_analysis: AnalysisResult) -> None:
    markdown = MarkdownTutorialBuilder().build(react_snapshot, react_analysis)

    expected_lines = "\n".join(f"line {number}" for number in range(1, 11))
    assert f"### `src/index.tsx`\n\nApplication entry point\n\n```tsx\n{expected_lines}\n...\n```" in markdown
    assert "line 11" not in markdown


def test_react_tutorial_content(react_snapshot: RepositorySnapshot, react_analysis: AnalysisResult) -> None:
    markdown = MarkdownTutorialBuilder().build(react_snapshot, react_analysis)

    assert "- **Community**: Active community" in markdown
    assert "### Languages\n\n- **JavaScript**" in markdown
    assert "### Frameworks\n\n- **React**: Popular UI library" in markdown
    assert "### Tools & Libraries\n\n- **Node.js**" in markdown
    assert "- Run `npm install`" in markdown
    assert "- Start with the entry point (`src/index.tsx`)" in markdown
    assert "Focus on these critical modules:\n- UI Components: Reusable UI building blocks" in markdown
    assert "1. Create a new component that displays project statistics" in markdown
    assert "[React Documentation](https://react.dev)" in markdown
    assert "Vite Documentation" not in markdown
    assert "> **Learning Tip**: Utility functions are reusable helpers" in markdown


def test_placeholders_for_empty_analysis() -> None:
    markdown = MarkdownTutorialBuilder().build(RepositorySnapshot(), AnalysisResult())

    assert markdown.startswith("# Repository Tutorial")
    assert "- **Primary language**: Not specified" in markdown
    assert "No specific technologies were detected." in markdown
    assert "No conventional module directories were detected." in markdown
    assert "No key files were identified for this repository." in markdown
    assert "- Examine the folder structure" in markdown
    assert "### Official Documentation" not in markdown
    assert "Add a new feature or improve an existing one" in markdown


def test_python_exercise_branch() -> None:
    analysis = AnalysisResult(tech_stack=("Python", "Flask"))

    markdown = MarkdownTutorialBuilder().build(make_snapshot(name="api"), analysis)

    assert "1. Add a new API endpoint" in markdown
    assert "- Run `pip install -r requirements.txt`" in markdown


def test_custom_templates_dir_overrides_default(tmp_path: Path) -> None:
    (tmp_path / "tutorial.md.j2").write_text("Custom {{ title }}\n", encoding="utf-8")

    markdown = MarkdownTutorialBuilder(tmp_path).build(make_snapshot(name="demo"), AnalysisResult())

    assert markdown == "Custom demo\n"


def test_helpers() -> None:
    assert categorize_tech_stack(["Python", "Django", "Docker"]) == {
        "languages": ["Python"],
        "frameworks": ["Django"],
        "tools": ["Docker"],
    }
    assert community_size(20000) == "Large and active"
    assert community_size(1001) == "Active community"
    assert community_size(101) == "Growing community"
    assert community_size(100) == "Small community"
    assert module_learning_tip("Business Services").startswith("Services contain business logic")
    assert module_learning_tip("Custom Hooks").startswith("Examine the files")
    assert build_preview("notes.txt", "") is None
    assert build_preview("main.py", "print('hi')") == {"language": "python", "code": "print('hi')"}


def test_module_files_listed() -> None:
    analysis = AnalysisResult(
        core_modules=(
            ModuleInfo(
                key="models",
                name="Data Models",
                purpose="Data structures and schemas",
                files=("app/models/user.py",),
            ),
        ),
    )

    markdown = MarkdownTutorialBuilder().build(RepositorySnapshot(), analysis)

    assert "### Data Models\n\nData structures and schemas\n\nFiles:\n- `app/models/user.py`" in markdown
    assert "Models define data structure" in markdown


def test_preview_keeps_consecutive_blank_lines() -> None:
    snapshot = make_snapshot(["main.py"], {"main.py": "a = 1\n\n\nb = 2\n"}, name="demo")
    analysis = AnalysisResult(
        important_files=(ImportantFile(path="main.py", description="Entry script"),),
    )

    markdown = MarkdownTutorialBuilder().build(snapshot, analysis)

    assert "```python\na = 1\n\n\nb = 2\n```" in markdown
    assert "@@" not in markdown


def test_documentation_links_only_cover_first_five_technologies() -> None:
    analysis = AnalysisResult(
        tech_stack=("Docker", "Vite", "Tailwind CSS", "GraphQL", "Jest", "React"),
    )

    markdown = MarkdownTutorialBuilder().build(make_snapshot(name="demo"), analysis)

    assert "React Documentation" not in markdown
    assert "### Official Documentation" not in markdown
