"""Parsed version model."""

from __future__ import annotations

from dataclasses import dataclass

from version_compare.core.comparator import compare_versions
from version_compare.models import CompOp
from version_compare.models.manifest import VersionManifest
from version_compare.models.part import NumericPart, Part


@dataclass(frozen=True, eq=False)
class Version:
    """An ordered, non-empty sequence of parts.

    ``source`` is the string the version was parsed from. It is kept for
    display only and plays no part in comparisons: ``Version`` equality
    follows :func:`compare_versions`, so ``1.0`` equals ``1``.
    """

    parts: tuple[Part, ...]
    source: str = ""

    def __post_init__(self) -> None:
        if not self.parts:
            raise ValueError("A version needs at least one part")

    @classmethod
    def parse(cls, raw: str, manifest: VersionManifest | None = None) -> Version:
        from version_compare.core.parser import parse

        return parse(raw, manifest=manifest)

    @property
    def part_count(self) -> int:
        return len(self.parts)

    def part(self, index: int) -> Part | None:
        """Return the part at ``index``, or None past the end."""
        if 0 <= index < len(self.parts):
            return self.parts[index]
        return None

    def as_str(self) -> str:
        return self.source or ".".join(str(p) for p in self.parts)

    def compare(self, other: Version) -> CompOp:
        return compare_versions(self, other)

    def compare_to(self, other: Version, operator: CompOp) -> bool:
        return operator.evaluate(compare_versions(self, other))

    def __str__(self) -> str:
        return self.as_str()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is CompOp.EQ

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is CompOp.LT

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is not CompOp.GT

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is CompOp.GT

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is not CompOp.LT

    def __hash__(self) -> int:
        # Trailing zeros compare equal to absence, so leave them out.
        parts = list(self.parts)
        while parts and isinstance(parts[-1], NumericPart) and parts[-1].is_zero:
            parts.pop()
        return hash(tuple(parts))
