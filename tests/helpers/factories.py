"""Factory functions for creating pools in tests.

Usage:
    from tests.helpers import make_pool_account

    account = make_pool_account(reserve_a=5_000, reserve_b=7_000)
"""

from stableswap.handlers import initialize_pool
from stableswap.math.fixed_point import FixedPoint
from stableswap.state import PoolAccount, PoolState
from tests.helpers.constants import (
    AUTHORITY,
    DEFAULT_AMP,
    FEE_RATE_30_BPS,
    POOL_ADDRESS,
    SEED_AMOUNT,
)


def make_pool_account(
    reserve_a: int = SEED_AMOUNT,
    reserve_b: int = SEED_AMOUNT,
    amplification: int = DEFAULT_AMP,
    fee_rate: FixedPoint = FEE_RATE_30_BPS,
    address: str = POOL_ADDRESS,
) -> PoolAccount:
    """Create a pool account initialized through the real handler.

    Args:
        reserve_a: Initial deposit of token A (default: 1,000,000)
        reserve_b: Initial deposit of token B (default: 1,000,000)
        amplification: Amplification coefficient (default: 100)
        fee_rate: Fee on swap input (default: 0.3%)
        address: Pool account identifier

    Returns:
        PoolAccount holding the freshly initialized state
    """
    account = PoolAccount(address=address)
    initialize_pool(
        account,
        reserve_a,
        reserve_b,
        amplification,
        authority=AUTHORITY,
        fee_rate=fee_rate,
    )
    return account


def make_pool_state(**kwargs) -> PoolState:
    """Create an initialized PoolState; accepts make_pool_account arguments."""
    return make_pool_account(**kwargs).load()
