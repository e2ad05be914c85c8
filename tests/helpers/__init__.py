"""Test helpers module for shared test utilities.

- constants: Pool parameters and common amounts
- factories: Pool account factory functions
"""

from tests.helpers.constants import (
    AUTHORITY,
    DEFAULT_AMP,
    FEE_RATE_30_BPS,
    MAX_TEST_RESERVE,
    POOL_ADDRESS,
    SEED_AMOUNT,
    ZERO_FEE,
)
from tests.helpers.factories import make_pool_account, make_pool_state

__all__ = [
    # Constants
    "AUTHORITY",
    "POOL_ADDRESS",
    "SEED_AMOUNT",
    "DEFAULT_AMP",
    "FEE_RATE_30_BPS",
    "ZERO_FEE",
    "MAX_TEST_RESERVE",
    # Factories
    "make_pool_account",
    "make_pool_state",
]
