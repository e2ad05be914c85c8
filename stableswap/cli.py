"""Command-line tool for inspecting stable swap pricing.

Usage:
    stableswap invariant 1000000 1000000 --amp 100
    stableswap quote 1000000 1000000 1000 --amp 100 --fee-bps 30
"""

from __future__ import annotations

import argparse
import sys

import structlog

from stableswap.constants import DEFAULT_FEE_BPS, FEE_DENOMINATOR
from stableswap.errors import StableSwapError
from stableswap.handlers import initialize_pool, quote_swap
from stableswap.log_config import configure_logging
from stableswap.math.fixed_point import FixedPoint
from stableswap.math.stable_math import compute_invariant
from stableswap.state import PoolAccount, SwapDirection

logger = structlog.get_logger()


def _cmd_invariant(args: argparse.Namespace) -> int:
    d = compute_invariant(args.reserve_a, args.reserve_b, args.amp)
    print(f"D = {d}")
    return 0


def _cmd_quote(args: argparse.Namespace) -> int:
    account = PoolAccount(address="cli")
    state = initialize_pool(
        account,
        args.reserve_a,
        args.reserve_b,
        args.amp,
        authority="cli",
        fee_rate=FixedPoint.from_bps(args.fee_bps),
    )
    result = quote_swap(state, args.amount_in, SwapDirection(args.direction))

    print(f"amount_in:        {result.amount_in}")
    print(f"fee:              {result.fee_amount}")
    print(f"amount_out:       {result.amount_out}")
    print(f"invariant before: {result.invariant_before}")
    print(f"invariant after:  {result.invariant_after}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stableswap", description=__doc__.splitlines()[0])
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    invariant = subparsers.add_parser("invariant", help="Compute the invariant D")
    invariant.add_argument("reserve_a", type=int)
    invariant.add_argument("reserve_b", type=int)
    invariant.add_argument("--amp", type=int, required=True, help="Amplification coefficient")
    invariant.set_defaults(func=_cmd_invariant)

    quote = subparsers.add_parser("quote", help="Quote an exact-input swap")
    quote.add_argument("reserve_a", type=int)
    quote.add_argument("reserve_b", type=int)
    quote.add_argument("amount_in", type=int)
    quote.add_argument("--amp", type=int, required=True, help="Amplification coefficient")
    quote.add_argument(
        "--fee-bps",
        type=int,
        default=DEFAULT_FEE_BPS,
        help=f"Fee in basis points of {FEE_DENOMINATOR} (default: {DEFAULT_FEE_BPS})",
    )
    quote.add_argument(
        "--direction",
        choices=[d.value for d in SwapDirection],
        default=SwapDirection.A_TO_B.value,
    )
    quote.set_defaults(func=_cmd_quote)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        return args.func(args)
    except StableSwapError as e:
        logger.debug("command_failed", command=args.command, error=e.code.value)
        print(f"Error [{e.code.value}]: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
