"""CLI command for resolving and laying out one drug.

Provides `recipegraph show` as a top-level command.
"""

from __future__ import annotations

from typing import Annotated

import typer

from recipegraph.cli._config import load_config
from recipegraph.cli._format import format_number, format_table, print_json, print_lines
from recipegraph.cli.drugs_cmd import CatalogOption, open_catalog
from recipegraph.exceptions import UnknownNodeError
from recipegraph.view import RecipeView


def _apply_toggles(view: RecipeView, collapse_all: bool, toggle: list[int]) -> None:
    """Apply --collapse-all, then each --toggle id against the view of the moment.

    A --toggle id collapses an expanded node and expands a collapsed one.
    """
    if collapse_all:
        view.toggle_all(expand=False)
    for node_id in toggle:
        try:
            view.toggle(node_id)
        except UnknownNodeError as e:
            print(f"Error: {e}")
            raise typer.Exit(1) from e


def register_commands(app: typer.Typer) -> None:
    """Register show as a top-level command on the app."""

    @app.command("show")
    def show(
        name: Annotated[str, typer.Argument(help="Drug to resolve (case-insensitive)")],
        catalog_path: CatalogOption = None,
        collapse_all: Annotated[
            bool, typer.Option("--collapse-all", help="Collapse every node before showing")
        ] = False,
        toggle: Annotated[
            list[int] | None,
            typer.Option(
                "--toggle", help="Expand or collapse the node with this id (repeatable, applied in order)"
            ),
        ] = None,
        as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
        output: Annotated[str | None, typer.Option("--output", help="Write JSON to file")] = None,
    ):
        """Resolve a drug's recipe tree and print its laid-out nodes."""
        catalog = open_catalog(catalog_path)
        view = RecipeView(catalog, load_config().layout)
        view.select(name)
        _apply_toggles(view, collapse_all, toggle or [])

        if as_json:
            data = {
                "drug": name,
                "nodes": [node.to_dict() for node in view.nodes],
                "edges": [edge.to_dict() for edge in view.edges],
            }
            print_json("show", data, output)
            return

        edge_count = len(view.edges)
        print(f"\nDrug: {name} | {len(view.nodes)} nodes | {edge_count} edges\n")

        headers = ["Id", "Depth", "Role", "Label", "X", "Y", "Hidden"]
        rows = [
            [
                str(node.id),
                str(node.depth),
                node.role.value,
                "  " * node.depth + node.label,
                format_number(node.x),
                format_number(node.y),
                str(len(node.source.hidden_children)) if node.has_hidden else "",
            ]
            for node in view.nodes
        ]
        print_lines(format_table(headers, rows))

        print(f"\n  For JSON: recipegraph show {name!r} --json")
