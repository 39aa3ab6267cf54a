"""Tests for entry point detection."""

from __future__ import annotations

from repotutor.analyzers.entrypoints import find_entry_points


def test_entry_points_in_tree_order() -> None:
    tree = ["server.js", "README.md", "src/main.py"]

    assert find_entry_points(tree) == ("server.js", "src/main.py")


def test_file_matching_two_patterns_listed_once() -> None:
    # "src/index.ts" matches both "index.ts" and "src/index"
    assert find_entry_points(["src/index.ts"]) == ("src/index.ts",)


def test_entry_points_capped_at_five() -> None:
    tree = [f"pkg{index}/main.py" for index in range(8)]

    entries = find_entry_points(tree)

    assert len(entries) == 5
    assert entries[0] == "pkg0/main.py"


def test_no_entry_points() -> None:
    assert find_entry_points(["docs/guide.md", "LICENSE"]) == ()
