"""Instruction models."""

from stableswap.models.instructions import (
    InitializePoolInstruction,
    Instruction,
    SwapInstruction,
    parse_instruction,
)
from stableswap.models.types import Uint64, validate_uint64

__all__ = [
    "InitializePoolInstruction",
    "SwapInstruction",
    "Instruction",
    "parse_instruction",
    "Uint64",
    "validate_uint64",
]
