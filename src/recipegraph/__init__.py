"""Recipegraph - resolve drug recipes into composition trees and lay them out."""

from recipegraph.catalog import Catalog, DrugRecord, load_catalog, parse_recipe
from recipegraph.exceptions import CatalogError, UnknownNodeError
from recipegraph.resolver import resolve
from recipegraph.state import is_togglable, iter_tree, toggle_all, toggle_node
from recipegraph.tree import CompositionNode, NodeAttributes, NodeRole
from recipegraph.view import RecipeView
from recipegraph.viz import (
    FlatEdge,
    FlatNode,
    LayoutConfig,
    flatten,
    layout,
    layout_with,
    to_networkx,
)

__all__ = [
    # Catalog
    "Catalog",
    "DrugRecord",
    "load_catalog",
    "parse_recipe",
    # Tree
    "CompositionNode",
    "NodeAttributes",
    "NodeRole",
    "resolve",
    # Expand/collapse
    "is_togglable",
    "iter_tree",
    "toggle_all",
    "toggle_node",
    # Flatten and layout
    "FlatEdge",
    "FlatNode",
    "LayoutConfig",
    "flatten",
    "layout",
    "layout_with",
    "to_networkx",
    # Session
    "RecipeView",
    # Errors
    "CatalogError",
    "UnknownNodeError",
]
