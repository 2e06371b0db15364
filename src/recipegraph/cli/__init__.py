"""Recipegraph CLI: browse a drug catalog and inspect recipe trees.

Entry point for the `recipegraph` command. Requires ``pip install recipegraph[cli]``.

Commands:
    drugs ls        List drugs in the catalog
    show            Resolve, flatten and lay out one drug's recipe tree
"""

from __future__ import annotations


def _require_typer():
    """Check that typer is available."""
    try:
        import typer  # noqa: F401
    except ImportError:
        import sys

        print("Error: typer is required for the CLI. Install with: pip install recipegraph[cli]", file=sys.stderr)
        raise SystemExit(1) from None


def create_app():
    """Create the Typer app with all subcommands."""
    _require_typer()

    import typer

    from recipegraph.cli.drugs_cmd import app as drugs_app
    from recipegraph.cli.show_cmd import register_commands

    app = typer.Typer(
        name="recipegraph",
        help="Drug recipe tree resolution and layout CLI.",
        no_args_is_help=True,
    )
    app.add_typer(drugs_app, name="drugs")
    register_commands(app)

    return app


def main():
    """CLI entry point."""
    app = create_app()
    app()
