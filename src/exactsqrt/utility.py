# -----------------------------------------------------------------------------
#  Utility functions
# -----------------------------------------------------------------------------

from __future__ import annotations

import re

# 32-bit domain
U32_MAX = 2**32 - 1
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

# Largest generation bound for the prime table; also a safe upper bound
# for the integer square root of any u32.
TOP_ROOT_OF_U32 = 65536


class UserInputError(Exception):
    pass


class DomainError(ValueError):
    """Operation called outside its mathematical domain (e.g. factors(1))."""


class OutOfRangeError(ValueError):
    """Value does not fit the 32-bit representation."""


def typename(x: object) -> str:
    return type(x).__name__


def check_u32(v: object, label: str = "value") -> int:
    """Return v unchanged if it is an int in [0, U32_MAX], else raise OutOfRangeError."""
    if isinstance(v, bool) or not isinstance(v, int):
        raise OutOfRangeError(f"{label} must be an int, got {typename(v)}")
    if v < 0 or v > U32_MAX:
        raise OutOfRangeError(f"{label} {v} is outside the unsigned 32-bit range")
    return v


def fits_i32(v: int) -> bool:
    return I32_MIN <= v <= I32_MAX


# --- CLI input parsing -------------------------------------------------------

_INT_RE = re.compile(r"^[+-]?\d+$")
_RATIONAL_RE = re.compile(r"^\s*([+-]?\d+)\s*(?:/\s*([+-]?\d+))?\s*$")


def _clean(text: str) -> str:
    # allow digit grouping: 1_000_000 or 1,000,000
    return text.strip().replace("_", "").replace(",", "")


def parse_u32(text: str, label: str = "number") -> int:
    s = _clean(text)
    if not _INT_RE.match(s):
        raise UserInputError(f"Invalid input: {label} {text!r} is not an integer.")
    v = int(s)
    if v < 0 or v > U32_MAX:
        raise UserInputError(f"Invalid input: {label} must lie in 0..{U32_MAX}, got {v}.")
    return v


def parse_rational(text: str) -> tuple[int, int]:
    """
    Parse "a", "a/b" or "-a/b" into a (numerator, denominator) pair of
    signed 32-bit ints. The pair is not reduced here.
    """
    m = _RATIONAL_RE.match(_clean(text))
    if not m:
        raise UserInputError(f"Invalid input: {text!r} is not a rational like 3 or 3/4.")
    numer = int(m.group(1))
    denom = int(m.group(2)) if m.group(2) is not None else 1
    if denom == 0:
        raise UserInputError("Invalid input: denominator is zero.")
    for part in (numer, denom):
        if not fits_i32(part):
            raise UserInputError(
                f"Invalid input: {part} does not fit a signed 32-bit integer "
                f"({I32_MIN}..{I32_MAX})."
            )
    return numer, denom
