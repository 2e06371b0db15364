"""Centered tree layout for a flattened composition tree.

Each parent's children are spread horizontally at fixed spacing and
centered under it, one level per ``vertical_spacing``. Subtree widths are
not taken into account, so wide or unbalanced subtrees can overlap their
neighbours at the same depth. Callers that need collision-free placement
should post-process the coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import networkx as nx

from recipegraph.viz.flatten import FlatEdge, FlatNode


@dataclass(frozen=True)
class LayoutConfig:
    """Geometry for the layout engine.

    Defaults place the root at the top-center of a 1000px-wide canvas.
    """

    root_x: float = 500.0
    root_y: float = 80.0
    horizontal_spacing: float = 250.0
    vertical_spacing: float = 100.0


def build_child_index(edges: Iterable[FlatEdge]) -> nx.DiGraph:
    """Build a parent -> children graph from flat edges.

    ``G.successors(n)`` yields children in the order their edges appear.
    """
    G = nx.DiGraph()
    G.add_edges_from((edge.source_id, edge.target_id) for edge in edges)
    return G


def layout(
    nodes: list[FlatNode],
    edges: list[FlatEdge],
    root_x: float,
    root_y: float,
    h_spacing: float,
    v_spacing: float,
) -> None:
    """Assign ``x``/``y`` to every node in place.

    The root (id 0) is placed at ``(root_x, root_y)``. A node at ``(x, y)``
    with ``k`` children places child ``i`` at
    ``(x - (k - 1) * h_spacing / 2 + i * h_spacing, y + v_spacing)``.

    Args:
        nodes: Output of flatten; ``nodes[i].id`` must equal ``i``
        edges: Output of flatten
        root_x: Horizontal position of the root
        root_y: Vertical position of the root
        h_spacing: Distance between sibling centers
        v_spacing: Distance between depth levels
    """
    if not nodes:
        return

    G = build_child_index(edges)
    by_id = {node.id: node for node in nodes}
    _place(by_id, G, nodes[0].id, root_x, root_y, h_spacing, v_spacing)


def layout_with(nodes: list[FlatNode], edges: list[FlatEdge], config: LayoutConfig) -> None:
    """Run layout with geometry taken from a LayoutConfig."""
    layout(
        nodes,
        edges,
        config.root_x,
        config.root_y,
        config.horizontal_spacing,
        config.vertical_spacing,
    )


def _place(
    by_id: dict[int, FlatNode],
    G: nx.DiGraph,
    node_id: int,
    x: float,
    y: float,
    h_spacing: float,
    v_spacing: float,
) -> None:
    """Recursive helper for layout."""
    node = by_id[node_id]
    node.x = x
    node.y = y

    if node_id not in G:
        return

    children = list(G.successors(node_id))
    start_x = x - (len(children) - 1) * h_spacing / 2
    for i, child_id in enumerate(children):
        _place(by_id, G, child_id, start_x + i * h_spacing, y + v_spacing, h_spacing, v_spacing)


def to_networkx(nodes: list[FlatNode], edges: list[FlatEdge]) -> nx.DiGraph:
    """Export a flattened view as a DiGraph keyed by node id.

    Node attributes: label, role (string value), depth, x, y, has_hidden.
    """
    G = nx.DiGraph()
    for node in nodes:
        G.add_node(
            node.id,
            label=node.label,
            role=node.role.value,
            depth=node.depth,
            x=node.x,
            y=node.y,
            has_hidden=node.has_hidden,
        )
    G.add_edges_from((edge.source_id, edge.target_id) for edge in edges)
    return G
