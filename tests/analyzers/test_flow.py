"""Tests for the illustrative data-flow edges."""

from __future__ import annotations

from repotutor.analyzers.constants import FLOW_ENTRY_TO_PAGES
from repotutor.analyzers.flow import infer_data_flow_edges
from repotutor.models import DataFlowEdge, ModuleInfo

PAGES = ModuleInfo(key="pages", name="Application Pages", purpose="Routes", files=("src/pages/Home.tsx",))
UTILS = ModuleInfo(key="utils", name="Utility Functions", purpose="Helpers", files=("src/utils/format.ts",))


def test_single_module_yields_no_edges() -> None:
    assert infer_data_flow_edges([PAGES], ["src/index.tsx"]) == ()


def test_missing_entry_point_yields_no_edges() -> None:
    assert infer_data_flow_edges([PAGES, UTILS], []) == ()


def test_pages_without_components_yield_one_edge() -> None:
    edges = infer_data_flow_edges([PAGES, UTILS], ["src/index.tsx"])

    assert edges == (
        DataFlowEdge(source="src/index.tsx", target="src/pages/Home.tsx", reason=FLOW_ENTRY_TO_PAGES),
    )


def test_modules_without_pages_yield_no_edges() -> None:
    components = ModuleInfo(
        key="components", name="UI Components", purpose="Widgets", files=("src/components/Button.tsx",)
    )

    assert infer_data_flow_edges([components, UTILS], ["src/index.tsx"]) == ()
