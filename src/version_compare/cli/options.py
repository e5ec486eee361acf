"""Shared CLI options."""

from __future__ import annotations

import typer

OutputOption = typer.Option(None, "--output", "-o", help="Output format: table, json, yaml")
MaxDepthOption = typer.Option(None, "--max-depth", min=1, help="Only compare the first N parts")
IgnoreTextOption = typer.Option(
    None, "--ignore-text/--keep-text", help="Drop text parts before comparing",
)
