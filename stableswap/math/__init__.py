"""Mathematical utilities for the stable swap pool.

This package provides:
- FixedPoint: 18-decimal checked fixed-point arithmetic
- stable_math: Newton-Raphson solvers for the StableSwap invariant
"""

from stableswap.math.fixed_point import FixedPoint
from stableswap.math.stable_math import (
    add_fee,
    compute_invariant,
    compute_swap_input,
    compute_swap_output,
    compute_y,
    subtract_fee,
)

__all__ = [
    "FixedPoint",
    "compute_invariant",
    "compute_y",
    "compute_swap_output",
    "compute_swap_input",
    "subtract_fee",
    "add_fee",
]
