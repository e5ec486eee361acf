"""Turn raw version strings into Version objects.

Grammar: one or more segments separated by ``.``. Each segment is a
non-empty run of ASCII letters, ASCII digits, ``-``, ``_``, ``+`` or ``~``.
Only ``.`` separates segments; ``1.0-beta`` has the two parts ``1`` and
``0-beta``.
"""

from __future__ import annotations

import logging
import re

from version_compare.errors import ParseError
from version_compare.models.manifest import VersionManifest
from version_compare.models.part import Part, TextPart, part_from_segment
from version_compare.models.version import Version

logger = logging.getLogger(__name__)

SEPARATOR = "."
_SEGMENT_RE = re.compile(r"[A-Za-z0-9_+~-]+")


def parse_segments(raw: str) -> list[Part]:
    """Split and validate ``raw``, returning its parts in order."""
    if not raw:
        raise ParseError(raw, "empty version string")

    parts: list[Part] = []
    for index, segment in enumerate(raw.split(SEPARATOR)):
        if not segment:
            raise ParseError(raw, f"empty segment at position {index}")
        if not _SEGMENT_RE.fullmatch(segment):
            raise ParseError(raw, f"illegal character in segment {segment!r}")
        try:
            parts.append(part_from_segment(segment))
        except ValueError:
            # int() refuses digit strings past sys.get_int_max_str_digits()
            raise ParseError(raw, f"numeric segment too large at position {index}") from None
    return parts


def _apply_manifest(raw: str, parts: list[Part], manifest: VersionManifest) -> list[Part]:
    if manifest.ignore_text:
        parts = [p for p in parts if not isinstance(p, TextPart)]
    if manifest.max_depth is not None:
        parts = parts[: manifest.max_depth]
    if not parts:
        raise ParseError(raw, "no parts left after applying manifest")
    return parts


def parse(raw: str, manifest: VersionManifest | None = None) -> Version:
    """Parse ``raw`` into a Version, raising ParseError if it is malformed."""
    parts = parse_segments(raw)
    if manifest is not None and not manifest.is_default:
        parts = _apply_manifest(raw, parts, manifest)
    logger.debug("Parsed %r into %d part(s)", raw, len(parts))
    return Version(parts=tuple(parts), source=raw)


def try_parse(raw: str, manifest: VersionManifest | None = None) -> Version | None:
    """Parse a version string, returning None on failure."""
    try:
        return parse(raw, manifest=manifest)
    except ParseError:
        return None
