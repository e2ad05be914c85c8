"""Pydantic models for pool instructions.

Instructions form a closed tagged union on the `kind` field; the
processor dispatches each variant to its handler.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from stableswap.constants import FEE_DENOMINATOR
from stableswap.models.types import Uint64
from stableswap.state import SwapDirection


class InitializePoolInstruction(BaseModel):
    """Create a pool from two initial deposits."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: Literal["initialize_pool"] = "initialize_pool"
    amount_a: Uint64 = Field(alias="amountA")
    amount_b: Uint64 = Field(alias="amountB")
    amplification: Uint64
    authority: str = Field(min_length=1)
    fee_bps: int | None = Field(
        default=None,
        alias="feeBps",
        ge=0,
        lt=FEE_DENOMINATOR,
        description="Fee on swap input in basis points. Uses the configured default if omitted.",
    )


class SwapInstruction(BaseModel):
    """Trade against an existing pool."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: Literal["swap"] = "swap"
    amount_in: Uint64 = Field(alias="amountIn")
    min_amount_out: Uint64 = Field(alias="minAmountOut")
    direction: SwapDirection = SwapDirection.A_TO_B


Instruction = Annotated[
    InitializePoolInstruction | SwapInstruction,
    Field(discriminator="kind"),
]

_instruction_adapter: TypeAdapter[Instruction] = TypeAdapter(Instruction)


def parse_instruction(data: dict[str, Any]) -> InitializePoolInstruction | SwapInstruction:
    """Validate raw instruction data into its typed variant.

    Raises:
        pydantic.ValidationError: If the kind is unknown or a field is invalid
    """
    return _instruction_adapter.validate_python(data)
