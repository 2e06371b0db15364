"""Flattening and layout of composition trees for rendering.

Usage:
    nodes, edges = flatten(root)
    layout_with(nodes, edges, LayoutConfig())

The renderer reads ``nodes`` (with ``x``/``y``) and ``edges``; after any
expand/collapse, flatten and layout must run again.
"""

from recipegraph.viz.flatten import FlatEdge, FlatNode, flatten
from recipegraph.viz.layout import (
    LayoutConfig,
    build_child_index,
    layout,
    layout_with,
    to_networkx,
)

__all__ = [
    "FlatEdge",
    "FlatNode",
    "LayoutConfig",
    "build_child_index",
    "flatten",
    "layout",
    "layout_with",
    "to_networkx",
]
