"""Illustrative data-flow edges between entry point, pages and components.

This is not a data-flow analysis: at most two edges are produced from module
labels alone.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..models import DataFlowEdge, ModuleInfo, find_module
from .constants import FLOW_ENTRY_TO_PAGES, FLOW_PAGES_TO_COMPONENTS


def infer_data_flow_edges(
    modules: Sequence[ModuleInfo],
    entry_points: Sequence[str],
) -> Tuple[DataFlowEdge, ...]:
    edges: List[DataFlowEdge] = []
    if not entry_points or len(modules) <= 1:
        return ()

    pages = find_module(modules, "page")
    if pages is None or not pages.files:
        return ()

    edges.append(DataFlowEdge(source=entry_points[0], target=pages.files[0], reason=FLOW_ENTRY_TO_PAGES))

    components = find_module(modules, "component")
    if components is not None and components.files:
        edges.append(
            DataFlowEdge(source=pages.files[0], target=components.files[0], reason=FLOW_PAGES_TO_COMPONENTS)
        )
    return tuple(edges)


__all__ = ["infer_data_flow_edges"]
