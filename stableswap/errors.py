"""Stable swap error classes.

Every failure carries a stable ErrorCode so callers can tell a slippage
rejection apart from a misconfigured pool without parsing messages.
"""

from enum import Enum
from typing import ClassVar


class ErrorCode(str, Enum):
    """Stable identifiers for every failure kind."""

    INVALID_AMOUNT = "invalid_amount"
    INVALID_AMPLIFICATION = "invalid_amplification"
    INVALID_FEE_RATE = "invalid_fee_rate"
    ALREADY_INITIALIZED = "already_initialized"
    POOL_NOT_INITIALIZED = "pool_not_initialized"
    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"
    DIVISION_BY_ZERO = "division_by_zero"
    CONVERGENCE_FAILURE = "convergence_failure"
    DEGENERATE_SWAP = "degenerate_swap"
    SLIPPAGE_EXCEEDED = "slippage_exceeded"
    INSUFFICIENT_LIQUIDITY = "insufficient_liquidity"


class StableSwapError(Exception):
    """Base error for stable swap operations."""

    code: ClassVar[ErrorCode]


# --- Input validation ---


class InvalidAmount(StableSwapError):
    """Token amount is zero or not a valid uint64."""

    code = ErrorCode.INVALID_AMOUNT


class InvalidAmplification(StableSwapError):
    """Amplification coefficient outside the supported range."""

    code = ErrorCode.INVALID_AMPLIFICATION


class InvalidFeeRate(StableSwapError):
    """Fee rate must be in range [0, 1)."""

    code = ErrorCode.INVALID_FEE_RATE


class AlreadyInitialized(StableSwapError):
    """Pool account already holds state."""

    code = ErrorCode.ALREADY_INITIALIZED


class PoolNotInitialized(StableSwapError):
    """Pool account holds no state yet."""

    code = ErrorCode.POOL_NOT_INITIALIZED


# --- Arithmetic ---


class Overflow(StableSwapError, ArithmeticError):
    """Result does not fit in the target integer width."""

    code = ErrorCode.OVERFLOW


class Underflow(StableSwapError, ArithmeticError):
    """Subtraction would produce a negative result."""

    code = ErrorCode.UNDERFLOW


class DivisionByZero(StableSwapError, ArithmeticError):
    """Division or modulo by zero."""

    code = ErrorCode.DIVISION_BY_ZERO


class ConvergenceFailure(StableSwapError):
    """Newton-Raphson iteration did not converge within MAX_ITERATIONS."""

    code = ErrorCode.CONVERGENCE_FAILURE


class DegenerateSwap(StableSwapError):
    """A positive input would produce no output."""

    code = ErrorCode.DEGENERATE_SWAP


# --- Trading semantics ---


class SlippageExceeded(StableSwapError):
    """Output is below the caller's min_amount_out."""

    code = ErrorCode.SLIPPAGE_EXCEEDED


class InsufficientLiquidity(StableSwapError):
    """Trade would drain the output reserve."""

    code = ErrorCode.INSUFFICIENT_LIQUIDITY
