"""Helpers shared by the vcmp commands."""

from __future__ import annotations

from typing import Optional

import typer

from version_compare.config.settings import settings
from version_compare.core.parser import parse
from version_compare.errors import ParseError
from version_compare.models.manifest import VersionManifest
from version_compare.models.version import Version


def resolve_output(output: Optional[str]) -> str:
    return output or settings.default_output


def resolve_manifest(max_depth: Optional[int], ignore_text: Optional[bool]) -> VersionManifest:
    """Merge command-line flags over the configured defaults."""
    return VersionManifest(
        max_depth=max_depth if max_depth is not None else settings.max_depth,
        ignore_text=ignore_text if ignore_text is not None else settings.ignore_text,
    )


def parse_or_exit(raw: str, manifest: VersionManifest) -> Version:
    try:
        return parse(raw, manifest=manifest)
    except ParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
