"""vcmp sort - Order a list of versions."""

from __future__ import annotations

from typing import List, Optional

import typer

from version_compare.cli.commands.common import resolve_manifest, resolve_output
from version_compare.cli.options import IgnoreTextOption, MaxDepthOption, OutputOption
from version_compare.errors import ParseError
from version_compare.output.formatters import output_sorted
from version_compare.utils.versions import sort_versions


def sort(
    versions: List[str] = typer.Argument(help="Versions to sort"),
    reverse: bool = typer.Option(False, "--reverse", "-r", help="Newest first"),
    output: Optional[str] = OutputOption,
    max_depth: Optional[int] = MaxDepthOption,
    ignore_text: Optional[bool] = IgnoreTextOption,
) -> None:
    """Sort versions from oldest to newest."""
    manifest = resolve_manifest(max_depth, ignore_text)
    try:
        ordered = sort_versions(versions, reverse=reverse, manifest=manifest)
    except ParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
    output_sorted(ordered, resolve_output(output), reverse=reverse)
