"""Expand/collapse transitions on a composition tree.

Toggles only move children between ``visible_children`` and
``hidden_children``; no child is ever created, dropped, or duplicated.
Derived views are not updated here: run flatten and layout afterwards.
"""

from __future__ import annotations

import logging
from typing import Iterator

from recipegraph.tree import CompositionNode

logger = logging.getLogger(__name__)


def is_togglable(node: CompositionNode) -> bool:
    """True if the node has children to show or hide."""
    return node.has_hidden or bool(node.visible_children)


def toggle_node(node: CompositionNode) -> None:
    """Collapse a node with visible children, or expand a collapsed one.

    LEAF and CIRCULAR_REF nodes (no children) are left untouched.
    """
    if node.visible_children:
        node.hidden_children = node.visible_children
        node.visible_children = []
        logger.debug("Collapsed %r", node.label)
    elif node.hidden_children:
        node.visible_children = node.hidden_children
        node.hidden_children = []
        logger.debug("Expanded %r", node.label)


def toggle_all(root: CompositionNode, expand: bool) -> None:
    """Expand or collapse every node reachable from ``root``.

    Hidden subtrees are walked too, so nested levels are normalized even
    when an ancestor was collapsed.
    """
    for node in iter_tree(root):
        if not node.has_children:
            continue
        children = node.children
        if expand:
            node.visible_children, node.hidden_children = children, []
        else:
            node.visible_children, node.hidden_children = [], children
    logger.debug("%s all nodes under %r", "Expanded" if expand else "Collapsed", root.label)


def iter_tree(root: CompositionNode) -> Iterator[CompositionNode]:
    """Yield every node in pre-order, following visible and hidden children."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))
