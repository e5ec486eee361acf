"""Parsing policy applied when building a Version."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VersionManifest:
    max_depth: int | None = None  # keep only the first N parts
    ignore_text: bool = False  # drop text parts

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")

    @property
    def is_default(self) -> bool:
        return self.max_depth is None and not self.ignore_text
