"""Swap handler.

A swap is computed in full against an immutable PoolState snapshot and
only then committed, so a rejected swap never leaves a partial update.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from stableswap.constants import U64_MAX
from stableswap.errors import (
    DegenerateSwap,
    InsufficientLiquidity,
    InvalidAmount,
    SlippageExceeded,
    StableSwapError,
)
from stableswap.math.stable_math import (
    add_fee,
    compute_invariant,
    compute_swap_input,
    compute_swap_output,
    subtract_fee,
)
from stableswap.safe_int import S
from stableswap.state import PoolAccount, PoolState, SwapDirection

logger = structlog.get_logger()


@dataclass(frozen=True)
class SwapResult:
    """Outcome of a simulated or executed swap.

    Attributes:
        direction: Which reserve was paid into
        amount_in: Gross input, including the fee
        amount_out: Output paid to the trader
        fee_amount: Part of amount_in retained by the pool as fee
        reserve_in_after: Input reserve after the trade
        reserve_out_after: Output reserve after the trade
        invariant_before: D of the pre-trade reserves
        invariant_after: D of the post-trade reserves
    """

    direction: SwapDirection
    amount_in: int
    amount_out: int
    fee_amount: int
    reserve_in_after: int
    reserve_out_after: int
    invariant_before: int
    invariant_after: int


def _validate_amount_in(amount_in: int) -> None:
    if amount_in <= 0 or amount_in > U64_MAX:
        raise InvalidAmount(f"amount_in must be in [1, 2^64-1], got {amount_in}")


def _simulate(state: PoolState, amount_in: int, direction: SwapDirection) -> SwapResult:
    _validate_amount_in(amount_in)

    reserve_in, reserve_out = state.reserves_for(direction)
    invariant_before = state.invariant()

    amount_after_fee, fee_amount = subtract_fee(amount_in, state.fee_rate)
    if amount_after_fee == 0:
        raise DegenerateSwap(f"Input {amount_in} is consumed entirely by the fee")

    amount_out = compute_swap_output(reserve_in, reserve_out, amount_after_fee, state.amplification)

    # The fee stays in the input reserve on top of the invariant-preserving trade
    reserve_in_after = (S(reserve_in) + S(amount_in)).to_u64()
    reserve_out_after = (S(reserve_out) - S(amount_out)).value
    invariant_after = (
        compute_invariant(reserve_in_after, reserve_out_after, state.amplification)
        if reserve_out_after > 0
        else 0
    )

    return SwapResult(
        direction=direction,
        amount_in=amount_in,
        amount_out=amount_out,
        fee_amount=fee_amount,
        reserve_in_after=reserve_in_after,
        reserve_out_after=reserve_out_after,
        invariant_before=invariant_before,
        invariant_after=invariant_after,
    )


def _check_liquidity(result: SwapResult) -> None:
    if result.reserve_out_after == 0:
        raise InsufficientLiquidity(f"Swap of {result.amount_in} would drain the output reserve")


def quote_swap(
    state: PoolState,
    amount_in: int,
    direction: SwapDirection = SwapDirection.A_TO_B,
) -> SwapResult:
    """Simulate a swap without committing it.

    Raises:
        InvalidAmount: If amount_in is zero or exceeds uint64
        DegenerateSwap: If the input buys nothing
        InsufficientLiquidity: If the trade would drain the output reserve
        Overflow: If the input reserve would exceed uint64
    """
    result = _simulate(state, amount_in, direction)
    _check_liquidity(result)
    return result


def quote_amount_in(
    state: PoolState,
    amount_out: int,
    direction: SwapDirection = SwapDirection.A_TO_B,
) -> int:
    """Gross input (fee included) needed to buy amount_out.

    Raises:
        InvalidAmount: If amount_out is zero
        InsufficientLiquidity: If amount_out >= the output reserve
    """
    reserve_in, reserve_out = state.reserves_for(direction)
    amount_before_fee = compute_swap_input(reserve_in, reserve_out, amount_out, state.amplification)
    return add_fee(amount_before_fee, state.fee_rate)


def swap(
    account: PoolAccount,
    amount_in: int,
    min_amount_out: int,
    direction: SwapDirection = SwapDirection.A_TO_B,
) -> SwapResult:
    """Execute a trade against an initialized pool.

    Args:
        account: Pool account holding the current state
        amount_in: Gross input amount, including the fee
        min_amount_out: Smallest acceptable output (slippage floor)
        direction: Which reserve is paid into (default: A to B)

    Returns:
        SwapResult describing the committed trade

    Raises:
        PoolNotInitialized: If the account holds no state
        InvalidAmount: If amount_in is zero or exceeds uint64
        DegenerateSwap: If the input buys nothing
        SlippageExceeded: If the output is below min_amount_out
        InsufficientLiquidity: If the trade would drain the output reserve
        Overflow: If the input reserve would exceed uint64
    """
    log = logger.bind(pool=account.address, direction=direction.value)
    try:
        _validate_amount_in(amount_in)
        state = account.load()
        result = _simulate(state, amount_in, direction)
        if result.amount_out < min_amount_out:
            raise SlippageExceeded(
                f"Output {result.amount_out} is below min_amount_out {min_amount_out}"
            )
        _check_liquidity(result)
    except StableSwapError as e:
        log.debug(
            "swap_rejected",
            amount_in=amount_in,
            min_amount_out=min_amount_out,
            error=e.code.value,
            detail=str(e),
        )
        raise

    account.commit(state.with_reserves(direction, result.reserve_in_after, result.reserve_out_after))
    log.info(
        "swap_executed",
        amount_in=result.amount_in,
        amount_out=result.amount_out,
        fee_amount=result.fee_amount,
        invariant_before=result.invariant_before,
        invariant_after=result.invariant_after,
    )
    return result
