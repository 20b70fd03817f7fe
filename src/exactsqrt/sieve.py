# -----------------------------------------------------------------------------
#  sieve.py
#  Integer square root and the bounded prime sieve
# -----------------------------------------------------------------------------

from __future__ import annotations

from exactsqrt.utility import TOP_ROOT_OF_U32, check_u32


def sqrt_floor(v: int) -> int:
    """
    Return the largest r with r*r <= v, for v in the u32 range.

    Bisection keeps two bounds: min_root**2 <= v and top**2 > v. The gap
    top - min_root shrinks on every step and never reaches zero, so the
    loop ends with top == min_root + 1.
    """
    check_u32(v, "sqrt_floor argument")
    if v <= 1:
        return v

    min_root = 1
    top = min(v, TOP_ROOT_OF_U32)
    while top != min_root + 1:
        middle = (min_root + top) // 2
        if middle * middle <= v:
            min_root = middle
        else:
            top = middle
    return min_root


def get_primes(upper_bound: int) -> list[int]:
    """
    Ascending list of all primes <= upper_bound.

    Only candidates up to sqrt_floor(upper_bound) act as filters: any
    composite <= upper_bound has a factor in that range.
    """
    check_u32(upper_bound, "upper bound")
    if upper_bound <= 1:
        return []

    # alive[i] is true while candidate i has not been removed
    alive = bytearray([1]) * (upper_bound + 1)
    alive[0] = alive[1] = 0
    filter_upper_bound = sqrt_floor(upper_bound)

    for flt in range(2, upper_bound + 1):
        if not alive[flt]:
            continue
        if flt > filter_upper_bound:
            break
        # proper multiples only: candidate // flt >= 2
        start = 2 * flt
        if start <= upper_bound:
            alive[start::flt] = bytes(len(range(start, upper_bound + 1, flt)))

    return [i for i in range(2, upper_bound + 1) if alive[i]]
