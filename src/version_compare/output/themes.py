"""Result and part color maps."""

from version_compare.models import CompOp

RESULT_COLORS: dict[CompOp, str] = {
    CompOp.EQ: "cyan",
    CompOp.LT: "yellow",
    CompOp.GT: "green",
}

KIND_COLORS: dict[str, str] = {
    "numeric": "magenta",
    "text": "blue",
}


def styled_result(result: CompOp) -> str:
    color = RESULT_COLORS.get(result, "white")
    return f"[{color}]{result.sign}[/{color}]"


def styled_outcome(outcome: bool) -> str:
    if outcome:
        return "[green bold]true[/green bold]"
    return "[red bold]false[/red bold]"


def styled_kind(kind: str) -> str:
    color = KIND_COLORS.get(kind, "white")
    return f"[{color}]{kind}[/{color}]"
