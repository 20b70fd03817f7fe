# src/exactsqrt/cli.py

"""
exactsqrt - exact square roots of rationals over a 32-bit prime table

Prints prime tables, primality, factorizations, integer square roots and
symbolic square roots sqrt(r) = s * sqrt(root) with root square-free.

usage: see exactsqrt -h
"""

from __future__ import annotations

import argparse
import sys
import textwrap

import sympy
from colorama import Fore, Style
from colorama import deinit as colorama_deinit
from colorama import init as colorama_init

from exactsqrt import __version__ as _ver
from exactsqrt.config import load_settings
from exactsqrt.fmt import format_factorization, format_prime_table, strip_ansi
from exactsqrt.primes import factors, is_prime
from exactsqrt.rational import rational
from exactsqrt.runtime import APPLY, CFG, ensure_runtime_deps
from exactsqrt.runtime import current as _rt_current
from exactsqrt.sieve import get_primes, sqrt_floor
from exactsqrt.squareroot import sqrt
from exactsqrt.utility import DomainError, OutOfRangeError, UserInputError, parse_rational, parse_u32
from exactsqrt.workspace import resolve_output_path


def _print_user_error(msg: str) -> None:
    """Uniform, one-line friendly error."""
    prefix = f"{Fore.RED}Error:{Style.RESET_ALL}"
    if not (msg.startswith("Invalid input:") or msg.startswith("Error:")):
        msg = f"{prefix} {msg}"
    # runs after colorama is de-initialized, so strip here
    if not (_rt_current().color and sys.stderr.isatty()):
        msg = strip_ansi(msg)
    print(msg, file=sys.stderr)


def _debug(msg: str) -> None:
    if _rt_current().debug:
        print(f"[debug] {msg}", file=sys.stderr)


# ---- commands ----
# Each returns (exit_code, plain_text_result).

def _cmd_primes(args) -> tuple[int, str]:
    bound = parse_u32(args.n, "upper bound")
    limit = int(CFG("BEHAVIOUR.MAX_PRIMES_BOUND", 10_000_000))
    if bound > limit:
        raise UserInputError(
            f"Invalid input: upper bound {bound} exceeds BEHAVIOUR.MAX_PRIMES_BOUND = {limit}. "
            "Raise the limit in settings.toml or pass a smaller value."
        )
    per_row = args.per_row if args.per_row is not None else int(CFG("OUTPUT.PRIMES_PER_ROW", 10))
    if per_row < 1:
        raise UserInputError(f"Invalid input: --per-row must be positive, got {per_row}.")
    primes = get_primes(bound)
    _debug(f"{len(primes)} primes <= {bound}")
    if not primes:
        return 0, f"no primes <= {bound}"
    return 0, format_prime_table(primes, per_row)


def _cmd_isprime(args) -> tuple[int, str]:
    n = parse_u32(args.n)
    if is_prime(n):
        return 0, f"{n} is {Fore.GREEN}prime{Style.RESET_ALL}"
    return 0, f"{n} is {Fore.YELLOW}not prime{Style.RESET_ALL}"


def _cmd_factor(args) -> tuple[int, str]:
    n = parse_u32(args.n)
    return 0, f"{n} = {format_factorization(factors(n))}"


def _cmd_isqrt(args) -> tuple[int, str]:
    n = parse_u32(args.n)
    return 0, f"floor(sqrt({n})) = {sqrt_floor(n)}"


def _cmd_sqrt(args) -> tuple[int, str]:
    numer, denom = parse_rational(args.r)
    r = rational(numer, denom)
    res = sqrt(r)
    if res is None:
        return 1, f"{Fore.YELLOW}sqrt({r}) overflows the 32-bit representation{Style.RESET_ALL}"
    _debug(f"square part {res.square_part}, root {res.root}")
    pretty = args.pretty or bool(CFG("OUTPUT.PRETTY", False))
    if pretty:
        return 0, sympy.pretty(res.as_expr(), use_unicode=True)
    return 0, f"sqrt({r}) = {res}"


# ---- argparse ----
def _build_parser() -> argparse.ArgumentParser:

    epilog = textwrap.dedent("""\
    examples:
      exactsqrt primes 100 --per-row 5
      exactsqrt factor 4294967295
      exactsqrt sqrt 64/25
      exactsqrt --debug sqrt 1/2
      exactsqrt sqrt -- -3/4        (negative R must follow "--")

    settings:
      Read from <workspace>/settings.toml (EXACTSQRT_HOME overrides the
      workspace location) or from --config PATH.
    """)

    p = argparse.ArgumentParser(
        prog="exactsqrt",
        description="Exact square roots of rationals over a 32-bit prime table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {_ver}")
    p.add_argument("--config", default=None, help="Settings TOML file (default: workspace settings.toml)")
    p.add_argument("--output", default=None, help="Also write the result to a file (workspace-relative)")
    p.add_argument("--no-color", action="store_true", help="Disable colored output")
    p.add_argument("--debug", action="store_true", help="Show internal trace info and full tracebacks")

    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    sp = sub.add_parser("primes", help="print all primes <= N as a table")
    sp.add_argument("n", metavar="N")
    sp.add_argument("--per-row", type=int, default=None, help="primes per line")
    sp.set_defaults(func=_cmd_primes)

    sp = sub.add_parser("isprime", help="test N for primality")
    sp.add_argument("n", metavar="N")
    sp.set_defaults(func=_cmd_isprime)

    sp = sub.add_parser("factor", help="prime factorization of N >= 2")
    sp.add_argument("n", metavar="N")
    sp.set_defaults(func=_cmd_factor)

    sp = sub.add_parser("isqrt", help="floor of the square root of N")
    sp.add_argument("n", metavar="N")
    sp.set_defaults(func=_cmd_isqrt)

    sp = sub.add_parser("sqrt", help="exact square root of a rational R (e.g. 12 or 1/2)")
    sp.add_argument("r", metavar="R", help="rational a or a/b; write negative values after \"--\"")
    sp.add_argument("--pretty", action="store_true", help="render with sympy's pretty printer")
    sp.set_defaults(func=_cmd_sqrt)

    return p


def main(argv=None) -> int:
    """Thin wrapper: catch friendly errors, hide tracebacks unless debug."""
    try:
        return _main_impl(argv)
    except (UserInputError, DomainError, OutOfRangeError) as e:
        _print_user_error(str(e))
        return 2
    except KeyboardInterrupt:
        print("Aborted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        # Only show traceback in debug mode
        if _rt_current().debug:
            raise
        print(f"Unexpected error: {e.__class__.__name__}: {e}", file=sys.stderr)
        print("Run with --debug for a full traceback.", file=sys.stderr)
        return 1


# ---- main ----
def _main_impl(argv=None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except FileNotFoundError as e:
        raise UserInputError(str(e)) from None
    APPLY(settings)
    rt = _rt_current()
    rt.debug = rt.debug or bool(args.debug)

    rt.color = rt.color and not args.no_color
    colorama_init(autoreset=True, strip=None if rt.color else True)
    try:
        if not ensure_runtime_deps(strict=True):
            return 1

        _debug(f"exactsqrt {_ver}, settings: {settings._source or 'defaults'}")

        code, text = args.func(args)
        print(text)

        if args.output:
            out = resolve_output_path(args.output)
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(strip_ansi(text) + "\n", encoding="utf-8")
            _debug(f"wrote {out}")
        return code
    finally:
        colorama_deinit()


if __name__ == "__main__":
    raise SystemExit(main())
