# -----------------------------------------------------------------------------
#  fmt.py
#  Text formatting helpers
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from fractions import Fraction

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip_ansi(s: str) -> str:
    return _ANSI_RE.sub("", s)


def format_rational(r: Fraction | int) -> str:
    r = Fraction(r)
    if r.denominator == 1:
        return str(r.numerator)
    return f"{r.numerator}/{r.denominator}"


def format_factorization(factors: Iterable[tuple[int, int]]) -> str:
    """
    Turn [(p, e), ...] into a tidy string like: 2^3 × 3 × 5^2
    """
    parts: list[str] = []
    for p, e in factors:
        parts.append(f"{p}^{e}" if e > 1 else f"{p}")
    return " × ".join(parts) if parts else "1"


def format_prime_table(primes: Sequence[int], per_row: int = 10) -> str:
    """
    Lay primes out in rows of `per_row` right-aligned columns.
    Width is taken from the largest prime so every column lines up.
    """
    if per_row < 1:
        raise ValueError(f"per_row must be positive, got {per_row}")
    if not primes:
        return ""
    width = len(str(primes[-1]))
    lines = []
    for i in range(0, len(primes), per_row):
        row = primes[i:i + per_row]
        lines.append(" ".join(f"{p:>{width}}" for p in row))
    return "\n".join(lines)
