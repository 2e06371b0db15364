"""Composition tree types produced by the resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from recipegraph.catalog import DrugRecord


class NodeRole(str, Enum):
    """Role of a node in a composition tree.

    Values:
        ROOT: The drug the tree was resolved for
        COMPOSITE: A component with a catalog record (may have zero children)
        LEAF: A component with no catalog record; never expanded
        CIRCULAR_REF: A component already being expanded higher up the path
    """

    ROOT = "root"
    COMPOSITE = "composite"
    LEAF = "leaf"
    CIRCULAR_REF = "circular_ref"


@dataclass(frozen=True)
class NodeAttributes:
    """Catalog data attached to ROOT and COMPOSITE nodes.

    ``name`` is the catalog spelling, which may differ in case from the
    node label.
    """

    name: str
    recipe_text: str | None
    price: float | None
    effects: str | None
    addictiveness: float | None

    @classmethod
    def from_record(cls, record: DrugRecord) -> NodeAttributes:
        return cls(
            name=record.name,
            recipe_text=record.recipe_text,
            price=record.price,
            effects=record.effects,
            addictiveness=record.addictiveness,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "recipe": self.recipe_text,
            "price": self.price,
            "effects": self.effects,
            "addictiveness": self.addictiveness,
        }


@dataclass(eq=False)
class CompositionNode:
    """One occurrence of a drug or component along an expansion path.

    Children are partitioned into ``visible_children`` and
    ``hidden_children``. For a node with children exactly one of the two is
    non-empty; LEAF and CIRCULAR_REF nodes have neither. Nodes compare by
    identity since the same label can occur many times in one tree.
    """

    label: str
    role: NodeRole
    attributes: NodeAttributes | None = None
    visible_children: list[CompositionNode] = field(default_factory=list)
    hidden_children: list[CompositionNode] = field(default_factory=list)

    @property
    def children(self) -> list[CompositionNode]:
        """Full child set, visible first then hidden."""
        return [*self.visible_children, *self.hidden_children]

    @property
    def has_children(self) -> bool:
        return bool(self.visible_children or self.hidden_children)

    @property
    def has_hidden(self) -> bool:
        return bool(self.hidden_children)

    @property
    def is_collapsed(self) -> bool:
        return bool(self.hidden_children) and not self.visible_children

    def __repr__(self) -> str:
        return (
            f"CompositionNode({self.label!r}, {self.role.name}, "
            f"visible={len(self.visible_children)}, hidden={len(self.hidden_children)})"
        )
