# -----------------------------------------------------------------------------
#  primes.py
#  Prime table, primality test and trial-division factorizer
# -----------------------------------------------------------------------------

from __future__ import annotations

import sys
import threading
from collections.abc import Iterable, Iterator
from time import perf_counter

from exactsqrt.model import Factor
from exactsqrt.runtime import current as _rt_current
from exactsqrt.sieve import get_primes, sqrt_floor
from exactsqrt.utility import TOP_ROOT_OF_U32, DomainError, check_u32


class PrimeTable:
    """
    Immutable, strictly ascending table of primes.

    `bound` is the generation bound: every prime <= bound is in the table.
    For the process-wide table that is 65536, enough to factor any u32
    because sqrt_floor(U32_MAX) < 65536. Smaller tables are fine for
    tests as long as inputs stay below max_prime**2.
    """

    __slots__ = ("_primes", "_bound")

    def __init__(self, primes: Iterable[int], bound: int | None = None):
        table = tuple(primes)
        if not table:
            raise ValueError("prime table is empty")
        for prev, nxt in zip(table, table[1:]):
            if nxt <= prev:
                raise ValueError(f"prime table not strictly ascending at {prev}, {nxt}")
        if bound is None:
            bound = table[-1]
        elif bound < table[-1]:
            raise ValueError(f"bound {bound} is below the largest stored prime {table[-1]}")
        self._primes = table
        self._bound = check_u32(bound, "table bound")

    @classmethod
    def up_to(cls, bound: int) -> PrimeTable:
        return cls(get_primes(bound), bound=bound)

    # --- sequence protocol ---

    def __len__(self) -> int:
        return len(self._primes)

    def __getitem__(self, i):
        return self._primes[i]

    def __iter__(self) -> Iterator[int]:
        return iter(self._primes)

    def __repr__(self) -> str:
        return f"PrimeTable(bound={self._bound}, primes={len(self._primes)})"

    @property
    def bound(self) -> int:
        return self._bound

    @property
    def max_prime(self) -> int:
        return self._primes[-1]

    @property
    def primes(self) -> tuple[int, ...]:
        return self._primes

    # --- lookups ---

    def stored_prime_index(self, n: int) -> int | None:
        """Index of n in the table, or None. Values above max_prime are never found."""
        last = len(self._primes) - 1
        max_stored = self._primes[last]
        if n >= max_stored:
            return last if n == max_stored else None
        if n <= 1:
            return None

        min_index, top_index = 0, last
        while min_index + 1 < top_index:
            middle_index = (min_index + top_index) // 2
            if n < self._primes[middle_index]:
                top_index = middle_index
            else:
                min_index = middle_index
        return min_index if self._primes[min_index] == n else None

    def is_prime(self, n: int) -> bool:
        check_u32(n)
        if n <= self._bound:
            return self.stored_prime_index(n) is not None
        limit = sqrt_floor(n)
        for p in self._primes:
            if p > limit:
                break
            if n % p == 0:
                return False
        return True

    def factors(self, n: int) -> list[Factor]:
        """
        Prime decomposition of n >= 2 as [Factor(p, count), ...], ascending.

        When the next table prime exceeds sqrt_floor(remaining), or the table
        runs out, the remainder is itself prime.
        """
        check_u32(n)
        if n <= 1:
            raise DomainError(f"factorization is undefined for {n}")

        result: list[Factor] = []
        remaining = n
        limit = sqrt_floor(remaining)
        for p in self._primes:
            if p > limit:
                break
            count = 0
            while remaining % p == 0:
                remaining //= p
                count += 1
            if count:
                result.append(Factor(p, count))
                if remaining == 1:
                    return result
                limit = sqrt_floor(remaining)
        result.append(Factor(remaining, 1))
        return result

    def is_square_free(self, n: int) -> bool:
        check_u32(n)
        if n == 0:
            return False
        if n == 1:
            return True
        return all(f.count == 1 for f in self.factors(n))


# --- Process-wide table ------------------------------------------------------

_TABLE: PrimeTable | None = None
_TABLE_LOCK = threading.Lock()


def prime_table() -> PrimeTable:
    """The shared table of all primes <= 65536, built once on first use."""
    global _TABLE
    table = _TABLE
    if table is None:
        with _TABLE_LOCK:
            if _TABLE is None:
                t0 = perf_counter()
                _TABLE = PrimeTable.up_to(TOP_ROOT_OF_U32)
                if _rt_current().debug:
                    dt_ms = (perf_counter() - t0) * 1000
                    print(
                        f"[debug] prime table: {len(_TABLE)} primes <= {TOP_ROOT_OF_U32} "
                        f"built in {dt_ms:.1f} ms",
                        file=sys.stderr,
                    )
            table = _TABLE
    return table


def stored_prime_index(n: int) -> int | None:
    return prime_table().stored_prime_index(n)


def is_prime(n: int) -> bool:
    return prime_table().is_prime(n)


def factors(n: int) -> list[Factor]:
    return prime_table().factors(n)


def is_square_free(n: int) -> bool:
    return prime_table().is_square_free(n)
