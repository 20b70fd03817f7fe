# -----------------------------------------------------------------------------
#  rational.py
#  Rationals restricted to signed 32-bit numerator and denominator
# -----------------------------------------------------------------------------

from __future__ import annotations

from fractions import Fraction
from numbers import Rational

from exactsqrt.utility import I32_MAX, I32_MIN, OutOfRangeError, fits_i32, typename


def is_rational32(r: Fraction | int) -> bool:
    """True if r (in lowest terms) has numerator and denominator in the i32 range."""
    r = Fraction(r)
    return fits_i32(r.numerator) and fits_i32(r.denominator)


def rational(numer: int, denom: int = 1) -> Fraction:
    """Build a reduced Fraction from two i32 values."""
    for part in (numer, denom):
        if isinstance(part, bool) or not isinstance(part, int):
            raise OutOfRangeError(f"rational parts must be int, got {typename(part)}")
        if not fits_i32(part):
            raise OutOfRangeError(f"{part} is outside the signed 32-bit range {I32_MIN}..{I32_MAX}")
    r = Fraction(numer, denom)
    # -2**31 / -1 reduces to 2**31
    if not is_rational32(r):
        raise OutOfRangeError(f"{numer}/{denom} reduces to {r}, outside the signed 32-bit range")
    return r


def as_rational32(value: Fraction | int) -> Fraction:
    if isinstance(value, bool) or not isinstance(value, Rational):
        raise OutOfRangeError(f"expected an int or Fraction, got {typename(value)}")
    r = Fraction(value)
    if not is_rational32(r):
        raise OutOfRangeError(f"{r} does not fit a 32-bit rational")
    return r


def _checked(r: Fraction) -> Fraction | None:
    return r if is_rational32(r) else None


def checked_add(a: Fraction, b: Fraction) -> Fraction | None:
    return _checked(Fraction(a) + Fraction(b))


def checked_sub(a: Fraction, b: Fraction) -> Fraction | None:
    return _checked(Fraction(a) - Fraction(b))


def checked_mul(a: Fraction, b: Fraction) -> Fraction | None:
    return _checked(Fraction(a) * Fraction(b))


def checked_div(a: Fraction, b: Fraction) -> Fraction | None:
    if b == 0:
        return None
    return _checked(Fraction(a) / Fraction(b))
