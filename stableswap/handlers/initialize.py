"""InitializePool handler."""

from __future__ import annotations

import structlog

from stableswap.config import DEFAULT_POOL_CONFIG, PoolConfig
from stableswap.constants import U64_MAX
from stableswap.errors import (
    AlreadyInitialized,
    InvalidAmount,
    InvalidAmplification,
    InvalidFeeRate,
    StableSwapError,
)
from stableswap.math.fixed_point import FixedPoint
from stableswap.math.stable_math import compute_invariant
from stableswap.safe_int import S
from stableswap.state import PoolAccount, PoolState

logger = structlog.get_logger()


def _validate_seed_amount(name: str, amount: int) -> None:
    if amount <= 0 or amount > U64_MAX:
        raise InvalidAmount(f"{name} must be in [1, 2^64-1], got {amount}")


def initialize_pool(
    account: PoolAccount,
    amount_a: int,
    amount_b: int,
    amplification: int,
    *,
    authority: str,
    fee_rate: FixedPoint | None = None,
    config: PoolConfig = DEFAULT_POOL_CONFIG,
) -> PoolState:
    """Create a pool from two initial deposits.

    The LP supply is seeded with the invariant of the initial reserves.
    Nothing is written to the account unless every check passes.

    Args:
        account: Empty pool account to initialize
        amount_a: Initial deposit of token A
        amount_b: Initial deposit of token B
        amplification: Amplification coefficient A
        authority: Identity permitted to manage the pool
        fee_rate: Fee on swap input, defaults to config.default_fee_rate
        config: Pool creation policy

    Returns:
        The committed PoolState

    Raises:
        AlreadyInitialized: If the account already holds state
        InvalidAmount: If either amount is zero or exceeds uint64
        InvalidAmplification: If amplification is outside the configured range
        InvalidFeeRate: If fee_rate exceeds config.max_fee_rate
        Overflow: If the initial invariant does not fit in uint64
    """
    log = logger.bind(pool=account.address)
    try:
        if account.is_initialized:
            raise AlreadyInitialized(f"Pool {account.address} is already initialized")

        _validate_seed_amount("amount_a", amount_a)
        _validate_seed_amount("amount_b", amount_b)

        if not config.min_amplification <= amplification <= config.max_amplification:
            raise InvalidAmplification(
                f"Amplification must be in [{config.min_amplification}, "
                f"{config.max_amplification}], got {amplification}"
            )

        if fee_rate is None:
            fee_rate = config.default_fee_rate
        if fee_rate > config.max_fee_rate:
            raise InvalidFeeRate(f"Fee rate {fee_rate} exceeds maximum {config.max_fee_rate}")

        invariant = compute_invariant(amount_a, amount_b, amplification)
        state = PoolState(
            reserve_a=amount_a,
            reserve_b=amount_b,
            amplification=amplification,
            lp_supply=S(invariant).to_u64(),
            fee_rate=fee_rate,
            authority=authority,
        )
    except StableSwapError as e:
        log.debug("initialize_rejected", error=e.code.value, detail=str(e))
        raise

    account.commit(state)
    log.info(
        "pool_initialized",
        reserve_a=amount_a,
        reserve_b=amount_b,
        amplification=amplification,
        lp_supply=state.lp_supply,
        fee_rate=str(fee_rate),
    )
    return state
