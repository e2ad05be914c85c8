"""Two-asset StableSwap pool core.

Deterministic integer math for an amplified constant-function pool:
invariant solving, pool initialization and swap execution.
"""

from stableswap.config import DEFAULT_POOL_CONFIG, PoolConfig
from stableswap.errors import ErrorCode, StableSwapError
from stableswap.handlers import SwapResult, initialize_pool, quote_amount_in, quote_swap, swap
from stableswap.math import FixedPoint, compute_invariant, compute_swap_output
from stableswap.processor import process_instruction
from stableswap.state import PoolAccount, PoolState, SwapDirection

__all__ = [
    "PoolConfig",
    "DEFAULT_POOL_CONFIG",
    "ErrorCode",
    "StableSwapError",
    "FixedPoint",
    "compute_invariant",
    "compute_swap_output",
    "PoolAccount",
    "PoolState",
    "SwapDirection",
    "SwapResult",
    "initialize_pool",
    "swap",
    "quote_swap",
    "quote_amount_in",
    "process_instruction",
]

__version__ = "0.1.0"
