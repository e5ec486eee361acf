"""Part-wise version comparison."""

from __future__ import annotations

from itertools import zip_longest
from typing import TYPE_CHECKING

from version_compare.models import CompOp
from version_compare.models.part import NumericPart, Part, TextPart

if TYPE_CHECKING:
    from version_compare.models.version import Version


def _cmp(a, b) -> CompOp:
    if a < b:
        return CompOp.LT
    if a > b:
        return CompOp.GT
    return CompOp.EQ


def _against_absence(part: Part) -> CompOp:
    """Compare a present part with a missing one.

    Trailing-zero rule: a zero numeric part is equal to absence, any other
    numeric part and every text part is greater.
    """
    if isinstance(part, NumericPart) and part.is_zero:
        return CompOp.EQ
    return CompOp.GT


def compare_parts(a: Part | None, b: Part | None) -> CompOp:
    """Three-way comparison of two parts, ``None`` meaning no part.

    Numbers compare as integers and text by code point. A numeric part is
    always less than a text part.
    """
    if a is None and b is None:
        return CompOp.EQ
    if b is None:
        return _against_absence(a)
    if a is None:
        return _against_absence(b).flip()

    if isinstance(a, NumericPart) and isinstance(b, NumericPart):
        return _cmp(a.value, b.value)
    if isinstance(a, TextPart) and isinstance(b, TextPart):
        return _cmp(a.text, b.text)
    if isinstance(a, NumericPart):
        return CompOp.LT
    return CompOp.GT


def compare_versions(a: Version, b: Version) -> CompOp:
    """Compare version ``a`` to ``b``, returning EQ, LT or GT.

    Parts are compared index by index; the first unequal pair decides.
    When one version runs out of parts, the rest of the longer one is
    compared against absence, so ``1.0`` equals ``1`` but ``1.0a`` is
    greater than ``1.0``.
    """
    for left, right in zip_longest(a.parts, b.parts):
        result = compare_parts(left, right)
        if result is not CompOp.EQ:
            return result
    return CompOp.EQ


def evaluate(result: CompOp, operator: CompOp) -> bool:
    """Check whether ``operator`` holds for a three-way ``result``."""
    return operator.evaluate(result)
