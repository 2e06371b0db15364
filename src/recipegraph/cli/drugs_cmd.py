"""Drug CLI commands: ls."""

from __future__ import annotations

from typing import Annotated

import typer

from recipegraph.catalog import Catalog, load_catalog
from recipegraph.cli._config import load_config
from recipegraph.cli._format import format_number, format_table, print_json, print_lines
from recipegraph.exceptions import CatalogError

app = typer.Typer(help="Browse the drug catalog.")

CatalogOption = Annotated[
    str | None,
    typer.Option("--catalog", help="Path to the catalog JSON (default: [tool.recipegraph] catalog)"),
]


def open_catalog(catalog_path: str | None) -> Catalog:
    """Load the catalog from --catalog or the configured default."""
    path = catalog_path or load_config().catalog
    if path is None:
        print("Error: No catalog given. Pass --catalog or set it in pyproject.toml:")
        print('  [tool.recipegraph]\n  catalog = "data.json"')
        raise typer.Exit(1)
    try:
        return load_catalog(path)
    except CatalogError as e:
        print(f"Error: {e}")
        raise typer.Exit(1) from e


@app.command("ls")
def drugs_ls(
    catalog_path: CatalogOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    output: Annotated[str | None, typer.Option("--output", help="Write JSON to file")] = None,
):
    """List drugs in selector order."""
    catalog = open_catalog(catalog_path)
    names = catalog.names()

    if as_json:
        print_json("drugs.ls", {"drugs": names}, output)
        return

    if not names:
        print("\n  Catalog is empty.")
        return

    headers = ["Name", "Recipe", "Price"]
    rows = []
    for record in sorted(catalog, key=lambda r: r.name.lower()):
        recipe = record.recipe_text or "—"
        if len(recipe) > 50:
            recipe = recipe[:47] + "…"
        rows.append([record.name, recipe, format_number(record.price)])

    print(f"\n  Drugs ({len(names)}):\n")
    print_lines(format_table(headers, rows))
