"""Helpers for working with collections of version strings."""

from __future__ import annotations

import logging
from typing import Iterable

from version_compare.core.parser import parse, try_parse
from version_compare.models import CompOp
from version_compare.models.manifest import VersionManifest

logger = logging.getLogger(__name__)


def is_newer(current: str, candidate: str, manifest: VersionManifest | None = None) -> bool:
    """Return True if candidate is newer than current."""
    cur = try_parse(current, manifest=manifest)
    cand = try_parse(candidate, manifest=manifest)
    if cur is None or cand is None:
        return False
    return cand.compare(cur) is CompOp.GT


def find_latest(versions: Iterable[str], manifest: VersionManifest | None = None) -> str | None:
    """Return the newest of ``versions``, skipping strings that do not parse.

    On ties the first occurrence wins. Returns None if nothing parses.
    """
    best = None
    for raw in versions:
        ver = try_parse(raw, manifest=manifest)
        if ver is None:
            logger.debug("Skipping unparseable version %r", raw)
            continue
        if best is None or ver > best:
            best = ver
    return best.source if best is not None else None


def sort_versions(
    versions: Iterable[str],
    reverse: bool = False,
    manifest: VersionManifest | None = None,
) -> list[str]:
    """Sort version strings, oldest first unless ``reverse``.

    The sort is stable, so equal versions (``1`` and ``1.0``) keep their
    input order. Raises ParseError on the first invalid string.
    """
    parsed = [parse(raw, manifest=manifest) for raw in versions]
    parsed.sort(reverse=reverse)
    return [v.source for v in parsed]
