from __future__ import annotations

import pytest

from version_compare.core.comparator import evaluate
from version_compare.models import CompOp

ALL_OPS = [CompOp.EQ, CompOp.LT, CompOp.LE, CompOp.GT, CompOp.GE, CompOp.NE]


def test_invert_table() -> None:
    assert CompOp.EQ.invert() is CompOp.NE
    assert CompOp.NE.invert() is CompOp.EQ
    assert CompOp.LT.invert() is CompOp.GT
    assert CompOp.GT.invert() is CompOp.LT
    assert CompOp.LE.invert() is CompOp.GE
    assert CompOp.GE.invert() is CompOp.LE


@pytest.mark.parametrize("op", ALL_OPS)
def test_invert_is_an_involution(op: CompOp) -> None:
    assert op.invert().invert() is op


def test_flip_swaps_operand_order() -> None:
    assert CompOp.LT.flip() is CompOp.GT
    assert CompOp.GE.flip() is CompOp.LE
    assert CompOp.EQ.flip() is CompOp.EQ
    assert CompOp.NE.flip() is CompOp.NE


@pytest.mark.parametrize(
    ("result", "true_ops"),
    [
        (CompOp.EQ, {CompOp.EQ, CompOp.LE, CompOp.GE}),
        (CompOp.LT, {CompOp.LT, CompOp.LE, CompOp.NE}),
        (CompOp.GT, {CompOp.GT, CompOp.GE, CompOp.NE}),
    ],
)
def test_evaluate(result: CompOp, true_ops: set) -> None:
    for op in ALL_OPS:
        assert op.evaluate(result) is (op in true_ops)
        assert evaluate(result, op) is (op in true_ops)


@pytest.mark.parametrize(
    ("sign", "expected"),
    [
        ("==", CompOp.EQ),
        ("=", CompOp.EQ),
        ("<", CompOp.LT),
        ("<=", CompOp.LE),
        (">", CompOp.GT),
        (" >= ", CompOp.GE),
        ("!=", CompOp.NE),
    ],
)
def test_from_sign(sign: str, expected: CompOp) -> None:
    assert CompOp.from_sign(sign) is expected


def test_from_name_is_case_insensitive() -> None:
    assert CompOp.from_name("le") is CompOp.LE
    assert CompOp.from_name("Gt") is CompOp.GT
    assert CompOp.from_name("NE") is CompOp.NE


def test_from_str_accepts_signs_and_names() -> None:
    assert CompOp.from_str("<=") is CompOp.LE
    assert CompOp.from_str("ge") is CompOp.GE


@pytest.mark.parametrize("bad", ["", "=>", "<>", "less", "~="])
def test_unknown_operator_rejected(bad: str) -> None:
    with pytest.raises(ValueError):
        CompOp.from_str(bad)


def test_from_ord() -> None:
    assert CompOp.from_ord(-5) is CompOp.LT
    assert CompOp.from_ord(0) is CompOp.EQ
    assert CompOp.from_ord(3) is CompOp.GT


def test_ord_only_for_outcomes() -> None:
    assert CompOp.LT.ord == -1
    assert CompOp.EQ.ord == 0
    assert CompOp.GT.ord == 1
    assert CompOp.LE.ord is None
    assert CompOp.NE.ord is None


def test_short_aliases_and_names() -> None:
    assert CompOp.Eq is CompOp.EQ
    assert CompOp.Ge is CompOp.GE
    assert CompOp.LE.short_name == "le"
    assert CompOp.NE.sign == "!="
    assert list(CompOp) == ALL_OPS
