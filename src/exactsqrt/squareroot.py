# -----------------------------------------------------------------------------
#  sqrt.py
#  Square root of a rational such that only the root of a square-free
#  positive integer remains: sqrt(r) = s * sqrt(root)
# -----------------------------------------------------------------------------

from __future__ import annotations

from fractions import Fraction

from exactsqrt.model import SqrtResult
from exactsqrt.primes import factors
from exactsqrt.rational import as_rational32
from exactsqrt.utility import I32_MAX, U32_MAX, DomainError


def sqrt(r: Fraction | int) -> SqrtResult | None:
    """
    Return SqrtResult(square_part, root) with square_part**2 * root == r,
    or None when an intermediate value leaves the 32-bit range.

    The denominator is made a perfect square first: multiplying numerator
    and denominator by the product of its odd-exponent primes moves those
    primes into the numerator, where they end up in the root.
    """
    r = as_rational32(r)
    if r < 0:
        raise DomainError(f"cannot take the square root of negative {r}")

    numer = r.numerator
    denom = r.denominator
    denom_square, denom_root = split_square_div_root(denom)

    num_norm = numer * denom_root
    if num_norm > U32_MAX:
        return None

    num_square, num_root = split_square_times_root(num_norm)
    if num_square > I32_MAX or denom_square > I32_MAX:
        return None
    return SqrtResult(Fraction(num_square, denom_square), num_root)


def split_square_times_root(n: int) -> tuple[int, int]:
    """n == square**2 * root, root square-free. split_square_times_root(12) == (2, 3)."""
    if n in (0, 1):
        return n, 1
    square = 1
    root = 1
    for f in factors(n):
        division, remainder = divmod(f.count, 2)
        square *= f.factor ** division
        if remainder:
            root *= f.factor
    return square, root


def split_square_div_root(n: int) -> tuple[int, int]:
    """n == square**2 / root, root square-free. split_square_div_root(12) == (6, 3)."""
    if n in (0, 1):
        return n, 1
    square = 1
    root = 1
    for f in factors(n):
        division, remainder = divmod(f.count, 2)
        if remainder:
            square *= f.factor ** (division + 1)
            root *= f.factor
        else:
            square *= f.factor ** division
    return square, root
