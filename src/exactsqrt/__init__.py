from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("exactsqrt")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .config import load_settings
from .model import Factor, SqrtResult
from .primes import PrimeTable, factors, is_prime, is_square_free, prime_table, stored_prime_index
from .rational import checked_add, checked_div, checked_mul, checked_sub, rational
from .runtime import APPLY, CFG
from .sieve import get_primes, sqrt_floor
from .squareroot import split_square_div_root, split_square_times_root, sqrt
from .utility import DomainError, OutOfRangeError, UserInputError

__all__ = [
    "APPLY",
    "CFG",
    "DomainError",
    "Factor",
    "OutOfRangeError",
    "PrimeTable",
    "SqrtResult",
    "UserInputError",
    "__version__",
    "checked_add",
    "checked_div",
    "checked_mul",
    "checked_sub",
    "factors",
    "get_primes",
    "is_prime",
    "is_square_free",
    "load_settings",
    "prime_table",
    "rational",
    "split_square_div_root",
    "split_square_times_root",
    "sqrt",
    "sqrt_floor",
    "stored_prime_index",
]
