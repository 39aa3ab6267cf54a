"""Tests for module identification from directory fragments."""

from __future__ import annotations

from repotutor.analyzers.modules import build_modules, extract_key_symbols


def test_component_module_includes_file_and_symbol() -> None:
    modules = build_modules(["src/components/Foo.tsx"])

    assert len(modules) == 1
    module = modules[0]
    assert module.name == "UI Components"
    assert module.files == ("src/components/Foo.tsx",)
    assert module.key_symbols == ("Foo",)


def test_modules_follow_fragment_table_order() -> None:
    tree = [
        "src/store/index.ts",
        "src/pages/Home.tsx",
        "src/components/Button.tsx",
    ]

    names = [module.name for module in build_modules(tree)]

    assert names == ["UI Components", "Application Pages", "State Store"]


def test_module_files_capped_at_five_and_symbols_at_three() -> None:
    tree = [f"src/utils/helper{index}.js" for index in range(7)]

    module = build_modules(tree)[0]

    assert len(module.files) == 5
    assert module.key_symbols == ("helper0", "helper1", "helper2")


def test_directory_entries_are_not_module_files() -> None:
    modules = build_modules(["src/", "src/components/", "src/components/App.jsx"])

    assert modules[0].files == ("src/components/App.jsx",)


def test_fragment_requires_leading_separator() -> None:
    assert build_modules(["components/App.jsx"]) == ()


def test_windows_separators_match() -> None:
    modules = build_modules(["src\\services\\billing.py"])

    assert modules[0].name == "Business Services"
    assert modules[0].key_symbols == ("billing",)


def test_key_symbols_strip_only_known_extensions() -> None:
    assert extract_key_symbols(["a/Card.tsx", "a/styles.css", "a/.js"]) == ("Card", "styles.css")
