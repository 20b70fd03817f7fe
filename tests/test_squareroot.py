# tests/test_squareroot.py
from __future__ import annotations

from fractions import Fraction

import pytest
import sympy

from exactsqrt.model import SqrtResult
from exactsqrt.primes import is_square_free
from exactsqrt.squareroot import split_square_div_root, split_square_times_root, sqrt
from exactsqrt.utility import I32_MAX, DomainError, OutOfRangeError

SQRT_CASES = [
    (Fraction(12), (Fraction(2), 3)),
    (Fraction(1, 2), (Fraction(1, 2), 2)),
    (Fraction(64, 25), (Fraction(8, 5), 1)),
    (Fraction(3, 4), (Fraction(1, 2), 3)),
    (Fraction(2, 3), (Fraction(1, 3), 6)),
    (Fraction(0), (Fraction(0), 1)),
    (Fraction(1), (Fraction(1), 1)),
    (Fraction(I32_MAX), (Fraction(1), I32_MAX)),
    (Fraction(1, 65536), (Fraction(1, 256), 1)),
]


@pytest.mark.parametrize("r,expected", SQRT_CASES, ids=[str(r) for r, _ in SQRT_CASES])
def test_sqrt_known_values(r, expected):
    assert sqrt(r) == expected


def test_sqrt_accepts_int():
    assert sqrt(12) == (Fraction(2), 3)


def test_split_square_times_root():
    assert split_square_times_root(12) == (2, 3)
    assert split_square_times_root(0) == (0, 1)
    assert split_square_times_root(1) == (1, 1)
    assert split_square_times_root(2**5 * 3**2) == (12, 2)


def test_split_square_div_root():
    assert split_square_div_root(12) == (6, 3)
    assert split_square_div_root(0) == (0, 1)
    assert split_square_div_root(1) == (1, 1)
    assert split_square_div_root(25) == (5, 1)
    assert split_square_div_root(2) == (2, 2)


def test_sqrt_negative_is_undefined():
    with pytest.raises(DomainError):
        sqrt(Fraction(-1, 2))


def test_sqrt_out_of_range_input():
    with pytest.raises(OutOfRangeError):
        sqrt(Fraction(I32_MAX + 1))


def test_sqrt_overflow_yields_none():
    # 6 is not a square: the numerator is scaled by 6 and leaves the u32 range
    assert sqrt(Fraction(I32_MAX, 6)) is None
    assert sqrt(Fraction(I32_MAX, 2)) is not None


def test_sqrt_round_trip():
    for p in range(0, 80):
        for q in range(1, 80):
            r = Fraction(p, q)
            res = sqrt(r)
            assert res is not None, r
            assert res.square_part * res.square_part * res.root == r, r
            assert is_square_free(res.root), r
            assert res.value() == r


def test_result_as_sympy_expression():
    for r in (Fraction(12), Fraction(1, 2), Fraction(64, 25), Fraction(7, 18)):
        expr = sqrt(r).as_expr()
        assert sympy.simplify(expr - sympy.sqrt(sympy.Rational(r.numerator, r.denominator))) == 0


@pytest.mark.parametrize(
    "res,text",
    [
        (SqrtResult(Fraction(2), 3), "2 * sqrt(3)"),
        (SqrtResult(Fraction(1, 2), 2), "1/2 * sqrt(2)"),
        (SqrtResult(Fraction(8, 5), 1), "8/5"),
        (SqrtResult(Fraction(1), 5), "sqrt(5)"),
        (SqrtResult(Fraction(0), 1), "0"),
    ],
)
def test_result_str(res, text):
    assert str(res) == text
