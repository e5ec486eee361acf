"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer

app = typer.Typer(
    name="vcmp",
    help="Version Compare - Compare loosely formatted version numbers.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("version_compare").setLevel(logging.DEBUG)


def _register_commands() -> None:
    from version_compare.cli.commands.compare_cmd import compare
    from version_compare.cli.commands.check_cmd import check
    from version_compare.cli.commands.parse_cmd import parse_version
    from version_compare.cli.commands.sort_cmd import sort

    app.command(name="compare", help="Compare two versions")(compare)
    app.command(name="check", help="Evaluate a comparison operator")(check)
    app.command(name="parse", help="Show the parts of a version")(parse_version)
    app.command(name="sort", help="Sort versions")(sort)


_register_commands()


def main() -> None:
    app()
