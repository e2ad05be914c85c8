"""Deterministic fixed-point arithmetic.

Values are unsigned integers scaled by ONE (10^18) and must fit in 128 bits.
Multiplication and division promote to the 256-bit SafeInt register before
rescaling, so an intermediate product never masks a representable result.

Rounding rule: the default operators round toward zero. The explicit *_up
variants round away from zero and exist for amounts that must favor the
pool (fees, required balances).
"""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar

from stableswap.constants import FEE_DENOMINATOR, ONE, U128_MAX
from stableswap.errors import DivisionByZero, Overflow, Underflow
from stableswap.safe_int import S, SafeInt

__all__ = ["FixedPoint"]


def _narrow(value: SafeInt) -> FixedPoint:
    """Narrow a 256-bit intermediate back to the 128-bit FixedPoint width."""
    return FixedPoint(value.to_uint(128))


class FixedPoint:
    """18-decimal unsigned fixed-point number stored as int.

    Example: 0.003 is stored as 3_000_000_000_000_000
    """

    ONE: ClassVar[int] = ONE

    __slots__ = ("value",)
    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    def __init__(self, value: int) -> None:
        """Create FixedPoint from raw scaled value.

        Raises:
            TypeError: If value is not an int
            Underflow: If value is negative
            Overflow: If value exceeds 2^128-1
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"FixedPoint requires int, got {type(value).__name__}")
        if value < 0:
            raise Underflow(f"FixedPoint cannot be negative: {value}")
        if value > U128_MAX:
            raise Overflow(f"FixedPoint exceeds 128 bits: {value}")
        self.value = value

    @classmethod
    def from_raw(cls, raw: int) -> FixedPoint:
        """Create from a value already scaled by ONE."""
        return cls(raw)

    @classmethod
    def from_int(cls, i: int) -> FixedPoint:
        """Create from integer (will be scaled by ONE)."""
        return _narrow(S(i) * S(cls.ONE))

    @classmethod
    def from_fraction(cls, numerator: int, denominator: int) -> FixedPoint:
        """Create numerator / denominator, rounded toward zero."""
        return _narrow((S(numerator) * S(cls.ONE)) // S(denominator))

    @classmethod
    def from_bps(cls, bps: int) -> FixedPoint:
        """Create from basis points of FEE_DENOMINATOR (30 -> 0.003)."""
        return cls.from_fraction(bps, FEE_DENOMINATOR)

    def to_decimal(self) -> Decimal:
        """Convert to Decimal for display only, never for pricing."""
        return Decimal(self.value) / Decimal(self.ONE)

    # --- Checked arithmetic ---

    def add(self, other: FixedPoint) -> FixedPoint:
        return _narrow(S(self.value) + S(other.value))

    def sub(self, other: FixedPoint) -> FixedPoint:
        """Subtract other from self.

        Raises:
            Underflow: If other > self
        """
        return _narrow(S(self.value) - S(other.value))

    def mul_down(self, other: FixedPoint) -> FixedPoint:
        """Multiply, rounding toward zero: (a * b) // ONE"""
        return _narrow((S(self.value) * S(other.value)) // S(self.ONE))

    def mul_up(self, other: FixedPoint) -> FixedPoint:
        """Multiply, rounding up."""
        return _narrow((S(self.value) * S(other.value)).ceiling_div(self.ONE))

    def div_down(self, other: FixedPoint) -> FixedPoint:
        """Divide, rounding toward zero: (a * ONE) // b"""
        if other.value == 0:
            raise DivisionByZero("FixedPoint division by zero")
        return _narrow((S(self.value) * S(self.ONE)) // S(other.value))

    def div_up(self, other: FixedPoint) -> FixedPoint:
        """Divide, rounding up."""
        if other.value == 0:
            raise DivisionByZero("FixedPoint division by zero")
        return _narrow((S(self.value) * S(self.ONE)).ceiling_div(other.value))

    def complement(self) -> FixedPoint:
        """Return 1 - self.

        Raises:
            Underflow: If self > 1
        """
        return _narrow(S(self.ONE) - S(self.value))

    def mul_int_down(self, amount: int) -> int:
        """Apply this fraction to a raw token amount, rounding toward zero."""
        return ((S(amount) * S(self.value)) // S(self.ONE)).value

    def mul_int_up(self, amount: int) -> int:
        """Apply this fraction to a raw token amount, rounding up."""
        return (S(amount) * S(self.value)).ceiling_div(self.ONE).value

    def is_zero(self) -> bool:
        return self.value == 0

    # --- Operators (round toward zero) ---

    def __add__(self, other: FixedPoint) -> FixedPoint:
        return self.add(other)

    def __sub__(self, other: FixedPoint) -> FixedPoint:
        return self.sub(other)

    def __mul__(self, other: FixedPoint) -> FixedPoint:
        return self.mul_down(other)

    def __truediv__(self, other: FixedPoint) -> FixedPoint:
        return self.div_down(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.value >= other.value

    def __repr__(self) -> str:
        return f"FixedPoint({self.value})"

    def __str__(self) -> str:
        return str(self.to_decimal())
