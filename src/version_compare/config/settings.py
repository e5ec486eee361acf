"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from version_compare.models.manifest import VersionManifest

_TRUTHY = {"1", "true", "yes", "on"}


def _default_output() -> str:
    return os.environ.get("VCMP_OUTPUT", "") or "table"


def _default_max_depth() -> int | None:
    """Read VCMP_MAX_DEPTH; anything but a positive integer means no limit."""
    raw = os.environ.get("VCMP_MAX_DEPTH", "").strip()
    if raw.isdigit() and int(raw) > 0:
        return int(raw)
    return None


def _default_ignore_text() -> bool:
    return os.environ.get("VCMP_IGNORE_TEXT", "").strip().lower() in _TRUTHY


@dataclass
class Settings:
    default_output: str = field(default_factory=_default_output)  # "table", "json" or "yaml"
    max_depth: int | None = field(default_factory=_default_max_depth)
    ignore_text: bool = field(default_factory=_default_ignore_text)

    @property
    def manifest(self) -> VersionManifest:
        return VersionManifest(max_depth=self.max_depth, ignore_text=self.ignore_text)


# Global singleton
settings = Settings()
