from __future__ import annotations

from fractions import Fraction
from typing import NamedTuple

import sympy

from exactsqrt.fmt import format_rational


class Factor(NamedTuple):
    factor: int     # prime (or prime remainder)
    count: int      # exponent, always >= 1

    @property
    def value(self) -> int:
        return self.factor ** self.count


class SqrtResult(NamedTuple):
    """
    sqrt(r) == square_part * sqrt(root), with root square-free.
    """
    square_part: Fraction
    root: int

    def value(self) -> Fraction:
        """The rational whose square root this is."""
        return self.square_part * self.square_part * self.root

    def as_expr(self) -> sympy.Expr:
        s = sympy.Rational(self.square_part.numerator, self.square_part.denominator)
        return s * sympy.sqrt(self.root)

    def __str__(self) -> str:
        if self.square_part == 0:
            return "0"
        if self.root == 1:
            return format_rational(self.square_part)
        if self.square_part == 1:
            return f"sqrt({self.root})"
        return f"{format_rational(self.square_part)} * sqrt({self.root})"
