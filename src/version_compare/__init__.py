"""Compare loosely formatted, dot-separated version numbers.

>>> from version_compare import CompOp, VersionCompare
>>> VersionCompare.compare("1.2.3", "1.2.4")
<CompOp.LT: '<'>
>>> VersionCompare.compare_to("1", "0.1", CompOp.GE)
True
"""

from __future__ import annotations

from version_compare.core.parser import parse, try_parse
from version_compare.errors import ParseError
from version_compare.models import CompOp
from version_compare.models.manifest import VersionManifest
from version_compare.models.part import NumericPart, Part, TextPart
from version_compare.models.version import Version

__all__ = [
    "CompOp",
    "NumericPart",
    "ParseError",
    "Part",
    "TextPart",
    "Version",
    "VersionCompare",
    "VersionManifest",
    "compare",
    "compare_to",
    "parse",
    "try_parse",
]


class VersionCompare:
    @staticmethod
    def compare(a: str, b: str, manifest: VersionManifest | None = None) -> CompOp:
        """Compare version ``a`` to version ``b``.

        Returns ``CompOp.EQ``, ``CompOp.LT`` or ``CompOp.GT``. Raises
        ParseError if either string is not a valid version.
        """
        a_ver = parse(a, manifest=manifest)
        b_ver = parse(b, manifest=manifest)
        return a_ver.compare(b_ver)

    @staticmethod
    def compare_to(a: str, b: str, operator: CompOp, manifest: VersionManifest | None = None) -> bool:
        """Check whether ``a <operator> b`` holds.

        Raises ParseError if either string is not a valid version.
        """
        a_ver = parse(a, manifest=manifest)
        b_ver = parse(b, manifest=manifest)
        return a_ver.compare_to(b_ver, operator)


compare = VersionCompare.compare
compare_to = VersionCompare.compare_to
