"""vcmp parse - Show how a version is split into parts."""

from __future__ import annotations

from typing import Optional

import typer

from version_compare.cli.commands.common import parse_or_exit, resolve_manifest, resolve_output
from version_compare.cli.options import IgnoreTextOption, MaxDepthOption, OutputOption
from version_compare.output.formatters import output_parts


def parse_version(
    version: str = typer.Argument(help="Version to parse"),
    output: Optional[str] = OutputOption,
    max_depth: Optional[int] = MaxDepthOption,
    ignore_text: Optional[bool] = IgnoreTextOption,
) -> None:
    """List the numeric and text parts of a version."""
    manifest = resolve_manifest(max_depth, ignore_text)
    output_parts(parse_or_exit(version, manifest), resolve_output(output))
