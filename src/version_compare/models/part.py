"""Version part models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NumericPart:
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Numeric part must be non-negative, got {self.value}")

    @property
    def kind(self) -> str:
        return "numeric"

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TextPart:
    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Text part must not be empty")

    @property
    def kind(self) -> str:
        return "text"

    def __str__(self) -> str:
        return self.text


Part = Union[NumericPart, TextPart]


def part_from_segment(segment: str) -> Part:
    """Build a part from a single segment (no dots).

    A segment made only of ASCII digits becomes a NumericPart, anything
    else a TextPart kept verbatim.
    """
    if segment.isascii() and segment.isdigit():
        return NumericPart(int(segment))
    return TextPart(segment)
