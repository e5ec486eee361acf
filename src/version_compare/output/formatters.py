"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from version_compare.models import CompOp
from version_compare.models.version import Version

console = Console()


def _version_to_dict(v: Version) -> dict[str, Any]:
    return {
        "source": v.source,
        "parts": [{"kind": p.kind, "value": str(p)} for p in v.parts],
    }


def _emit(data: Any, fmt: str) -> bool:
    """Print ``data`` as JSON or YAML. Returns False for table output."""
    if fmt == "json":
        console.print_json(json.dumps(data, indent=2))
        return True
    if fmt == "yaml":
        console.print(yaml.dump(data, default_flow_style=False, sort_keys=False))
        return True
    return False


def output_comparison(a: Version, b: Version, result: CompOp, fmt: str) -> None:
    data = {
        "a": a.source,
        "b": b.source,
        "result": result.short_name,
        "sign": result.sign,
    }
    if not _emit(data, fmt):
        from version_compare.output.tables import comparison_panel
        console.print(comparison_panel(a, b, result))


def output_check(a: Version, b: Version, operator: CompOp, outcome: bool, fmt: str) -> None:
    data = {
        "a": a.source,
        "b": b.source,
        "operator": operator.short_name,
        "sign": operator.sign,
        "result": outcome,
    }
    if not _emit(data, fmt):
        from version_compare.output.tables import check_panel
        console.print(check_panel(a, b, operator, outcome))


def output_parts(version: Version, fmt: str) -> None:
    if not _emit(_version_to_dict(version), fmt):
        from version_compare.output.tables import parts_table
        console.print(parts_table(version))


def output_sorted(versions: list[str], fmt: str, reverse: bool = False) -> None:
    if not _emit(versions, fmt):
        from version_compare.output.tables import sorted_table
        console.print(sorted_table(versions, reverse=reverse))
