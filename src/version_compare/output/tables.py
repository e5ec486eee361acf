"""Rich table builders for each command."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table

from version_compare.models import CompOp
from version_compare.models.version import Version
from version_compare.output.themes import styled_kind, styled_outcome, styled_result


def comparison_panel(a: Version, b: Version, result: CompOp) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("A", str(a))
    table.add_row("B", str(b))
    table.add_row("Result", f"{a} {styled_result(result)} {b}")

    return Panel(table, title="[bold]Version Comparison[/bold]", border_style="blue")


def check_panel(a: Version, b: Version, operator: CompOp, outcome: bool) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Expression", f"{a} {operator.sign} {b}")
    table.add_row("Result", styled_outcome(outcome))

    border = "green" if outcome else "red"
    return Panel(table, title="[bold]Version Check[/bold]", border_style=border)


def parts_table(version: Version) -> Table:
    table = Table(title=f"Parts of {version}", expand=False)
    table.add_column("Index", justify="right", style="dim")
    table.add_column("Kind", no_wrap=True)
    table.add_column("Value", style="bold")

    for index, part in enumerate(version.parts):
        table.add_row(str(index), styled_kind(part.kind), str(part))
    return table


def sorted_table(versions: list[str], reverse: bool = False) -> Table:
    title = "Versions (newest first)" if reverse else "Versions (oldest first)"
    table = Table(title=title, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Version", style="magenta")

    for i, v in enumerate(versions, 1):
        table.add_row(str(i), v)
    return table
