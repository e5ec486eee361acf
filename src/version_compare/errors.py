"""Errors raised by version parsing."""

from __future__ import annotations


class ParseError(ValueError):
    """A string could not be parsed into a version."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid version {source!r}: {reason}")
