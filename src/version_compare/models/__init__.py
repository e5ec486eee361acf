"""Data models for version comparison."""

from __future__ import annotations

import enum


class CompOp(enum.Enum):
    """Comparison operator.

    ``EQ``, ``LT`` and ``GT`` double as the outcome of a three-way
    comparison; ``LE``, ``GE`` and ``NE`` are only used as queries.
    """

    EQ = "=="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    NE = "!="

    # Short aliases
    Eq = "=="
    Lt = "<"
    Le = "<="
    Gt = ">"
    Ge = ">="
    Ne = "!="

    @classmethod
    def from_sign(cls, sign: str) -> CompOp:
        s = sign.strip()
        if s == "=":
            return cls.EQ
        for member in cls:
            if member.value == s:
                return member
        raise ValueError(f"Unknown comparison sign: {sign!r}")

    @classmethod
    def from_name(cls, name: str) -> CompOp:
        key = name.strip().upper()
        if key in cls.__members__:
            return cls.__members__[key]
        raise ValueError(f"Unknown comparison operator name: {name!r}")

    @classmethod
    def from_str(cls, s: str) -> CompOp:
        """Resolve an operator given either as a sign (``<=``) or a name (``le``)."""
        try:
            return cls.from_sign(s)
        except ValueError:
            return cls.from_name(s)

    @classmethod
    def from_ord(cls, n: int) -> CompOp:
        if n < 0:
            return cls.LT
        if n > 0:
            return cls.GT
        return cls.EQ

    @property
    def sign(self) -> str:
        return self.value

    @property
    def short_name(self) -> str:
        return self.name.lower()

    @property
    def ord(self) -> int | None:
        return _ORDS.get(self)

    def invert(self) -> CompOp:
        """Return the paired operator: EQ/NE, LT/GT and LE/GE."""
        return _INVERSE[self]

    def flip(self) -> CompOp:
        """Return the operator that holds when the operands are swapped."""
        return _FLIPPED[self]

    def evaluate(self, result: CompOp) -> bool:
        """Check this operator against a three-way comparison ``result``."""
        if self is CompOp.EQ:
            return result is CompOp.EQ
        if self is CompOp.NE:
            return result is not CompOp.EQ
        if self is CompOp.LT:
            return result is CompOp.LT
        if self is CompOp.GT:
            return result is CompOp.GT
        if self is CompOp.LE:
            return result is not CompOp.GT
        return result is not CompOp.LT


_INVERSE: dict[CompOp, CompOp] = {
    CompOp.EQ: CompOp.NE,
    CompOp.NE: CompOp.EQ,
    CompOp.LT: CompOp.GT,
    CompOp.GT: CompOp.LT,
    CompOp.LE: CompOp.GE,
    CompOp.GE: CompOp.LE,
}

_FLIPPED: dict[CompOp, CompOp] = {
    CompOp.EQ: CompOp.EQ,
    CompOp.NE: CompOp.NE,
    CompOp.LT: CompOp.GT,
    CompOp.GT: CompOp.LT,
    CompOp.LE: CompOp.GE,
    CompOp.GE: CompOp.LE,
}

_ORDS: dict[CompOp, int] = {
    CompOp.LT: -1,
    CompOp.EQ: 0,
    CompOp.GT: 1,
}
