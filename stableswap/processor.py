"""Instruction dispatch.

Maps each instruction type to the handler that runs it, so adding an
instruction means registering one more entry rather than growing an
isinstance chain.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from stableswap.config import DEFAULT_POOL_CONFIG, PoolConfig
from stableswap.handlers import SwapResult, initialize_pool, swap
from stableswap.math.fixed_point import FixedPoint
from stableswap.models.instructions import InitializePoolInstruction, SwapInstruction
from stableswap.state import PoolAccount, PoolState

logger = structlog.get_logger()


def _run_initialize_pool(
    account: PoolAccount,
    instruction: InitializePoolInstruction,
    config: PoolConfig,
) -> PoolState:
    fee_rate = None
    if instruction.fee_bps is not None:
        fee_rate = FixedPoint.from_bps(instruction.fee_bps)
    return initialize_pool(
        account,
        instruction.amount_a,
        instruction.amount_b,
        instruction.amplification,
        authority=instruction.authority,
        fee_rate=fee_rate,
        config=config,
    )


def _run_swap(
    account: PoolAccount,
    instruction: SwapInstruction,
    config: PoolConfig,
) -> SwapResult:
    return swap(account, instruction.amount_in, instruction.min_amount_out, instruction.direction)


_HANDLERS: dict[type, Callable[[PoolAccount, Any, PoolConfig], PoolState | SwapResult]] = {
    InitializePoolInstruction: _run_initialize_pool,
    SwapInstruction: _run_swap,
}


def process_instruction(
    account: PoolAccount,
    instruction: InitializePoolInstruction | SwapInstruction,
    config: PoolConfig = DEFAULT_POOL_CONFIG,
) -> PoolState | SwapResult:
    """Run one instruction against a pool account.

    The caller guarantees exclusive access to the account for the duration
    of the call and has already checked that the signer is entitled to it.

    Returns:
        The new PoolState for initialize_pool, the SwapResult for swap

    Raises:
        TypeError: If the instruction type has no registered handler
        StableSwapError: Whatever the handler raises
    """
    handler = _HANDLERS.get(type(instruction))
    if handler is None:
        raise TypeError(f"No handler registered for {type(instruction).__name__}")

    logger.debug("process_instruction", pool=account.address, kind=instruction.kind)
    return handler(account, instruction, config)
