"""Tests for important-file selection, glossary and summary text."""

from __future__ import annotations

from repotutor.analyzers.glossary import generate_glossary
from repotutor.analyzers.summary import build_summary, select_important_files
from repotutor.models import ModuleInfo, RepoMetadata


def test_important_files_capped_at_ten() -> None:
    tree = ["README.md"] + [f"src/file{index}.py" for index in range(12)]
    key_files = {path: "x" for path in tree}

    selected = select_important_files(tree, key_files, [])

    assert len(selected) == 10
    assert selected[0].description == "Project documentation"
    assert selected[1].description == "Key source file"


def test_unlisted_files_are_skipped() -> None:
    selected = select_important_files(["docs/notes.txt", "go.mod"], {}, [])

    assert [item.path for item in selected] == ["go.mod"]


def test_summary_without_name_omits_project_clause() -> None:
    summary = build_summary(RepoMetadata(primary_language="Go"), ("Go",), ())

    assert summary == "The project uses Go."


def test_summary_defaults_language_to_software() -> None:
    summary = build_summary(RepoMetadata(name="tool"), (), ())

    assert summary == "tool is a software project."


def test_summary_lists_first_three_modules() -> None:
    modules = tuple(ModuleInfo(key=str(index), name=f"M{index}", purpose="p") for index in range(5))

    summary = build_summary(None, (), modules)

    assert summary == "Key modules include M0, M1, M2."


def test_glossary_skips_unknown_terms() -> None:
    terms = generate_glossary("unknown", ("Routing", "GraphQL", "Database"))

    assert [term.term for term in terms] == ["GraphQL"]
    assert terms[0].pitfall


def test_glossary_starts_with_package_manager() -> None:
    terms = generate_glossary("pip", ("REST API",))

    assert [term.term for term in terms] == ["pip", "REST API"]
