"""Current-selection session tying resolve, flatten, layout and toggles together.

A RecipeView owns at most one composition tree at a time. Selecting a new
drug discards the previous tree. Every toggle re-derives the flattened
nodes/edges and their layout, so ``nodes`` and ``edges`` always describe
the current visible state.

Example:
    >>> from recipegraph.catalog import DrugRecord
    >>> catalog = Catalog([DrugRecord("Speedball", "Cocaine + Heroin")])
    >>> view = RecipeView(catalog)
    >>> view.select("Speedball")
    >>> view.toggle(0)          # collapse the root
    True
    >>> [n.label for n in view.nodes]
    ['Speedball']
"""

from __future__ import annotations

import copy
import logging

from recipegraph.catalog import Catalog
from recipegraph.exceptions import UnknownNodeError
from recipegraph.resolver import resolve
from recipegraph.state import toggle_all, toggle_node
from recipegraph.tree import CompositionNode
from recipegraph.viz.flatten import FlatEdge, FlatNode, flatten
from recipegraph.viz.layout import LayoutConfig, layout_with

logger = logging.getLogger(__name__)


class RecipeView:
    """Interactive state for one selected drug.

    Args:
        catalog: Catalog used to resolve selections
        config: Layout geometry; defaults to LayoutConfig()
    """

    def __init__(self, catalog: Catalog, config: LayoutConfig | None = None) -> None:
        self.catalog = catalog
        self.config = config or LayoutConfig()
        self.selected: str | None = None
        self.root: CompositionNode | None = None
        self.nodes: list[FlatNode] = []
        self.edges: list[FlatEdge] = []
        self.all_expanded = False

    def drug_names(self) -> list[str]:
        """Names offered for selection, sorted case-insensitively."""
        return self.catalog.names()

    def select(self, drug_name: str) -> None:
        """Resolve ``drug_name`` and derive its initial, fully expanded view."""
        self.clear()
        self.selected = drug_name
        self.root = resolve(self.catalog, drug_name)
        self.refresh()
        logger.info("Selected %r: %d nodes", drug_name, len(self.nodes))

    def clear(self) -> None:
        """Forget the current selection."""
        self.selected = None
        self.root = None
        self.nodes = []
        self.edges = []
        self.all_expanded = False

    def refresh(self) -> None:
        """Re-run flatten and layout for the current tree."""
        if self.root is None:
            self.nodes, self.edges = [], []
            return
        self.nodes, self.edges = flatten(self.root)
        layout_with(self.nodes, self.edges, self.config)

    def node(self, node_id: int) -> FlatNode:
        """Return the FlatNode with ``node_id`` in the current pass."""
        if not 0 <= node_id < len(self.nodes):
            raise UnknownNodeError(node_id, len(self.nodes))
        return self.nodes[node_id]

    def toggle(self, node_id: int) -> bool:
        """Expand or collapse the node behind ``node_id`` and re-derive.

        Returns:
            True if something changed; False for nodes without children.

        Raises:
            UnknownNodeError: If ``node_id`` is not in the current pass.
        """
        flat = self.node(node_id)
        if not flat.togglable:
            return False
        toggle_node(flat.source)
        self.refresh()
        return True

    def toggle_all(self, expand: bool | None = None) -> bool:
        """Expand or collapse every node and re-derive.

        With ``expand=None`` the direction flips on each call, starting with
        expand. Returns the direction that was applied.
        """
        if expand is None:
            expand = not self.all_expanded
        if self.root is not None:
            toggle_all(self.root, expand)
            self.refresh()
        self.all_expanded = expand
        return expand

    def snapshot(self) -> tuple[list[FlatNode], list[FlatEdge]]:
        """Copies of the current nodes and edges for a renderer to hold on to.

        Later toggles and layouts do not affect the returned lists. The
        ``source`` back-references still point at the live tree.
        """
        return [copy.copy(node) for node in self.nodes], list(self.edges)
