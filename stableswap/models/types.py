"""Shared type definitions for instruction models."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from stableswap.constants import U64_MAX


def validate_uint64(value: Any) -> int:
    """Validate that a value is a valid uint64.

    Args:
        value: Value to validate (int or decimal string)

    Returns:
        Valid uint64 as int

    Raises:
        ValueError: If value is not a non-negative integer within uint64 range
    """
    if isinstance(value, bool):
        raise ValueError("Uint64 cannot be a boolean")

    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as err:
            raise ValueError(f"Uint64 must be a decimal integer string: '{value}'") from err

    if not isinstance(value, int):
        raise ValueError(f"Uint64 must be string or int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"Uint64 cannot be negative: {value}")
    if value > U64_MAX:
        raise ValueError(f"Uint64 overflow: {value} > 2^64-1")

    return value


# 64-bit unsigned integer (accepts int or decimal string)
Uint64 = Annotated[
    int,
    BeforeValidator(validate_uint64),
    Field(description="64-bit unsigned integer"),
]
