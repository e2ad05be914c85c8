"""Instruction handlers.

Each handler validates its own inputs, delegates the numeric work to the
stable math engine, and commits the new PoolState only on success.
"""

from stableswap.handlers.initialize import initialize_pool
from stableswap.handlers.swap import SwapResult, quote_amount_in, quote_swap, swap

__all__ = [
    "initialize_pool",
    "swap",
    "quote_swap",
    "quote_amount_in",
    "SwapResult",
]
