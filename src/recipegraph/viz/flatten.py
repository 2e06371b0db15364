"""Flatten a composition tree into renderable node and edge lists.

Only visible children are followed. Ids are assigned in pre-order from a
counter local to each call, so flattening the same tree with the same
visibility always yields the same ids.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Iterator

from recipegraph.state import is_togglable
from recipegraph.tree import CompositionNode, NodeAttributes, NodeRole

logger = logging.getLogger(__name__)


@dataclass
class FlatNode:
    """A node of the current flattened view.

    ``x`` and ``y`` are zero until the layout engine runs. ``has_hidden`` and
    ``togglable`` are fixed at flatten time; ``source`` points back at the
    CompositionNode so toggles can be applied to the tree.
    """

    id: int
    depth: int
    label: str
    role: NodeRole
    attributes: NodeAttributes | None
    has_hidden: bool
    togglable: bool
    source: CompositionNode = field(repr=False, compare=False)
    x: float = 0.0
    y: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "depth": self.depth,
            "label": self.label,
            "role": self.role.value,
            "x": self.x,
            "y": self.y,
            "has_hidden": self.has_hidden,
            "togglable": self.togglable,
            "attributes": self.attributes.to_dict() if self.attributes else None,
        }


@dataclass(frozen=True)
class FlatEdge:
    """Parent -> visible child relationship, by FlatNode id."""

    source_id: int
    target_id: int

    def to_dict(self) -> dict[str, int]:
        return {"source": self.source_id, "target": self.target_id}


def flatten(root: CompositionNode) -> tuple[list[FlatNode], list[FlatEdge]]:
    """Walk the visible part of a tree in pre-order.

    Args:
        root: Root of the composition tree

    Returns:
        (nodes, edges). ``nodes[i].id == i``; the root has id 0 and depth 0.
        Edges from one parent appear in child order.
    """
    nodes: list[FlatNode] = []
    edges: list[FlatEdge] = []
    _flatten_recursive(root, depth=0, ids=count(), nodes=nodes, edges=edges)
    logger.debug("Flattened %r into %d nodes, %d edges", root.label, len(nodes), len(edges))
    return nodes, edges


def _flatten_recursive(
    node: CompositionNode,
    depth: int,
    ids: Iterator[int],
    nodes: list[FlatNode],
    edges: list[FlatEdge],
) -> int:
    """Recursive helper for flatten. Returns the id assigned to ``node``."""
    flat = FlatNode(
        id=next(ids),
        depth=depth,
        label=node.label,
        role=node.role,
        attributes=node.attributes,
        has_hidden=node.has_hidden,
        togglable=is_togglable(node),
        source=node,
    )
    nodes.append(flat)

    for child in node.visible_children:
        child_id = _flatten_recursive(child, depth + 1, ids, nodes, edges)
        edges.append(FlatEdge(flat.id, child_id))

    return flat.id
