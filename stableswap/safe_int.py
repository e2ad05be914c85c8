"""Checked unsigned integer wrapper for the swap math.

SafeInt models the unsigned 256-bit intermediate register the solvers
compute in. Every operation is checked:
- Subtraction below zero raises Underflow
- Any result above 2^256-1 raises Overflow
- Division or modulo by zero raises DivisionByZero

Python ints never wrap, so without these checks an intermediate that would
not fit the declared width would silently succeed here and fail elsewhere.

Usage pattern:
    from stableswap.safe_int import S

    def calculate(a: int, b: int, c: int) -> int:
        # Wrap at entry
        sa, sb, sc = S(a), S(b), S(c)

        # Natural arithmetic - automatically checked
        result = (sa * sb) // sc  # Raises if sc == 0
        remainder = sa - sb       # Raises if sb > sa

        # Narrow at exit
        return result.to_u64()
"""

from __future__ import annotations

from stableswap.constants import U64_MAX, U256_MAX
from stableswap.errors import DivisionByZero, Overflow, Underflow


def _checked(value: int, op: str) -> SafeInt:
    """Wrap a raw result, enforcing the unsigned 256-bit range."""
    if value < 0:
        raise Underflow(f"Underflow: {op} = {value}")
    if value > U256_MAX:
        raise Overflow(f"Overflow: {op} exceeds 2^256-1")
    return SafeInt(value)


class SafeInt:
    """Unsigned integer with checked arithmetic operations.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Raises:
            TypeError: If value is not an int or SafeInt
            Underflow: If value is negative
            Overflow: If value exceeds 2^256-1
        """
        if isinstance(value, SafeInt):
            self._value = value._value
            return
        # bool is an int subclass but never a token amount
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")
        if value < 0:
            raise Underflow(f"SafeInt cannot hold negative value {value}")
        if value > U256_MAX:
            raise Overflow(f"SafeInt value exceeds 2^256-1: {value}")
        self._value = value

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        other_val = _extract_value(other)
        return _checked(self._value + other_val, f"{self._value} + {other_val}")

    def __radd__(self, other: int) -> SafeInt:
        return _checked(other + self._value, f"{other} + {self._value}")

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        return _checked(self._value - other_val, f"{self._value} - {other_val}")

    def __rsub__(self, other: int) -> SafeInt:
        return _checked(other - self._value, f"{other} - {self._value}")

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        """Multiply two values.

        Raises:
            Overflow: If the product exceeds 2^256-1
        """
        other_val = _extract_value(other)
        return _checked(self._value * other_val, f"{self._value} * {other_val}")

    def __rmul__(self, other: int) -> SafeInt:
        return _checked(other * self._value, f"{other} * {self._value}")

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division, rounding toward zero.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return _checked(self._value // other_val, f"{self._value} // {other_val}")

    def __rfloordiv__(self, other: int) -> SafeInt:
        if self._value == 0:
            raise DivisionByZero(f"Division by zero: {other} // 0")
        return _checked(other // self._value, f"{other} // {self._value}")

    def __truediv__(self, other: object) -> SafeInt:
        raise TypeError("SafeInt does not support true division; use floor division (//)")

    def __rtruediv__(self, other: object) -> SafeInt:
        raise TypeError("SafeInt does not support true division; use floor division (//)")

    def __mod__(self, other: SafeInt | int) -> SafeInt:
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Modulo by zero: {self._value} % 0")
        return SafeInt(self._value % other_val)

    def __pow__(self, exponent: int) -> SafeInt:
        return _checked(self._value**exponent, f"{self._value} ** {exponent}")

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    # --- Named operations ---

    def ceiling_div(self, other: SafeInt | int) -> SafeInt:
        """Ceiling division (rounds up).

        Equivalent to: (self + other - 1) // other

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Ceiling division by zero: {self._value}")
        if self._value == 0:
            return SafeInt(0)
        return SafeInt((self._value - 1) // other_val + 1)

    def abs_diff(self, other: SafeInt | int) -> SafeInt:
        """Return |self - other| without risking Underflow."""
        return SafeInt(abs(self._value - _extract_value(other)))

    def min(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(min(self._value, _extract_value(other)))

    def max(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(max(self._value, _extract_value(other)))

    def to_uint(self, bits: int) -> int:
        """Narrow to an unsigned integer of the given width.

        Raises:
            Overflow: If value does not fit in `bits` bits
        """
        if self._value > 2**bits - 1:
            raise Overflow(f"Value exceeds uint{bits} max: {self._value}")
        return self._value

    def to_u64(self) -> int:
        """Narrow to uint64, the width of token amounts and reserves."""
        if self._value > U64_MAX:
            raise Overflow(f"Value exceeds uint64 max: {self._value}")
        return self._value

    @classmethod
    def zero(cls) -> SafeInt:
        return cls(0)


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
