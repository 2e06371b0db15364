"""Recipe resolution: expand a drug name into a composition tree.

Each recursive call receives its own copy of the ancestor path, so a label
is only reported as circular when it repeats along a single root-to-node
chain. Siblings that share components are expanded independently.
"""

from __future__ import annotations

import logging

from recipegraph.catalog import Catalog, parse_recipe
from recipegraph.tree import CompositionNode, NodeAttributes, NodeRole

logger = logging.getLogger(__name__)


def resolve(catalog: Catalog, drug_name: str) -> CompositionNode:
    """Expand ``drug_name`` into a composition tree.

    Unknown names become LEAF nodes, names already on the current ancestor
    path become CIRCULAR_REF nodes, and everything with a catalog record is
    expanded through its recipe. Nothing here raises for missing or
    malformed data.

    Recursion depth equals the longest non-circular component chain, so a
    chain longer than roughly ``sys.getrecursionlimit()`` drugs raises
    RecursionError.

    Args:
        catalog: Catalog to look names up in
        drug_name: Name of the drug to expand (case-insensitive)

    Returns:
        Root of the composition tree. Its role is ROOT when the drug exists
        in the catalog, LEAF otherwise.

    Example:
        >>> from recipegraph.catalog import DrugRecord
        >>> catalog = Catalog([DrugRecord("A", "B + A")])
        >>> root = resolve(catalog, "A")
        >>> [(c.label, c.role.name) for c in root.visible_children]
        [('B', 'LEAF'), ('A', 'CIRCULAR_REF')]
    """
    root = _resolve_recursive(catalog, drug_name, ancestors=frozenset(), is_root=True)
    logger.debug("Resolved %r (%s)", drug_name, root.role.name)
    return root


def _resolve_recursive(
    catalog: Catalog,
    label: str,
    ancestors: frozenset[str],
    is_root: bool,
) -> CompositionNode:
    """Recursive helper for resolve."""
    key = label.lower()
    if key in ancestors:
        return CompositionNode(label, NodeRole.CIRCULAR_REF)

    record = catalog.find(label)
    if record is None:
        return CompositionNode(label, NodeRole.LEAF)

    path = ancestors | {key}
    children = []
    for component in parse_recipe(record.recipe_text):
        children.append(_resolve_recursive(catalog, component, path, is_root=False))
    return CompositionNode(
        label,
        NodeRole.ROOT if is_root else NodeRole.COMPOSITE,
        attributes=NodeAttributes.from_record(record),
        visible_children=children,
    )
