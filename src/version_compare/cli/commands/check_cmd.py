"""vcmp check - Evaluate a comparison operator."""

from __future__ import annotations

from typing import Optional

import typer

from version_compare.cli.commands.common import parse_or_exit, resolve_manifest, resolve_output
from version_compare.cli.options import IgnoreTextOption, MaxDepthOption, OutputOption
from version_compare.models import CompOp
from version_compare.output.formatters import output_check


def check(
    a: str = typer.Argument(help="Left-hand version"),
    operator: str = typer.Argument(help="Operator: ==, !=, <, <=, >, >= or eq, ne, lt, le, gt, ge"),
    b: str = typer.Argument(help="Right-hand version"),
    output: Optional[str] = OutputOption,
    max_depth: Optional[int] = MaxDepthOption,
    ignore_text: Optional[bool] = IgnoreTextOption,
) -> None:
    """Check whether 'A OPERATOR B' holds. Exits with 0 if it does, 1 if not."""
    try:
        op = CompOp.from_str(operator)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="OPERATOR")

    manifest = resolve_manifest(max_depth, ignore_text)
    a_ver = parse_or_exit(a, manifest)
    b_ver = parse_or_exit(b, manifest)

    outcome = a_ver.compare_to(b_ver, op)
    output_check(a_ver, b_ver, op, outcome, resolve_output(output))
    if not outcome:
        raise typer.Exit(code=1)
