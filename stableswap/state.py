"""Pool state.

PoolState is an immutable snapshot; every state transition builds a new one.
PoolAccount is the slot the storage layer hands to a handler for the
duration of one instruction: it holds at most one PoolState and swaps it
out with a single assignment.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from stableswap.errors import PoolNotInitialized
from stableswap.math.fixed_point import FixedPoint
from stableswap.math.stable_math import compute_invariant


class SwapDirection(str, Enum):
    """Which reserve a swap pays into."""

    A_TO_B = "a_to_b"
    B_TO_A = "b_to_a"

    @property
    def reverse(self) -> SwapDirection:
        return SwapDirection.B_TO_A if self is SwapDirection.A_TO_B else SwapDirection.A_TO_B


@dataclass(frozen=True)
class PoolState:
    """Persistent state of a two-asset stable swap pool.

    Attributes:
        reserve_a: Units of token A held by the pool
        reserve_b: Units of token B held by the pool
        amplification: Amplification coefficient A, fixed at creation
        lp_supply: Outstanding LP claims, seeded with the initial invariant
        fee_rate: Fee charged on swap input, in [0, 1), fixed at creation
        authority: Identity permitted to manage the pool
    """

    reserve_a: int
    reserve_b: int
    amplification: int
    lp_supply: int
    fee_rate: FixedPoint
    authority: str

    def invariant(self) -> int:
        """Recompute D from the current reserves."""
        return compute_invariant(self.reserve_a, self.reserve_b, self.amplification)

    def reserves_for(self, direction: SwapDirection) -> tuple[int, int]:
        """Return (reserve_in, reserve_out) for a swap direction."""
        if direction is SwapDirection.A_TO_B:
            return self.reserve_a, self.reserve_b
        return self.reserve_b, self.reserve_a

    def with_reserves(
        self,
        direction: SwapDirection,
        reserve_in: int,
        reserve_out: int,
    ) -> PoolState:
        """Return a copy with both reserves replaced at once."""
        if direction is SwapDirection.A_TO_B:
            return replace(self, reserve_a=reserve_in, reserve_b=reserve_out)
        return replace(self, reserve_a=reserve_out, reserve_b=reserve_in)


@dataclass
class PoolAccount:
    """Storage slot for one pool, resolved by the surrounding environment.

    Attributes:
        address: Identifier of the pool account
        state: Current state, or None before initialization
    """

    address: str
    state: PoolState | None = None

    @property
    def is_initialized(self) -> bool:
        return self.state is not None

    def load(self) -> PoolState:
        """Return the current state.

        Raises:
            PoolNotInitialized: If the account holds no state
        """
        if self.state is None:
            raise PoolNotInitialized(f"Pool {self.address} is not initialized")
        return self.state

    def commit(self, state: PoolState) -> None:
        self.state = state
