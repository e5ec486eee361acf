"""vcmp compare - Compare two versions."""

from __future__ import annotations

from typing import Optional

import typer

from version_compare.cli.commands.common import parse_or_exit, resolve_manifest, resolve_output
from version_compare.cli.options import IgnoreTextOption, MaxDepthOption, OutputOption
from version_compare.output.formatters import output_comparison


def compare(
    a: str = typer.Argument(help="First version"),
    b: str = typer.Argument(help="Second version"),
    output: Optional[str] = OutputOption,
    max_depth: Optional[int] = MaxDepthOption,
    ignore_text: Optional[bool] = IgnoreTextOption,
) -> None:
    """Show whether A is less than, equal to or greater than B."""
    manifest = resolve_manifest(max_depth, ignore_text)
    a_ver = parse_or_exit(a, manifest)
    b_ver = parse_or_exit(b, manifest)

    result = a_ver.compare(b_ver)
    output_comparison(a_ver, b_ver, result, resolve_output(output))
