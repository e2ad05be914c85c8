"""Tests for pool state, accounts and configuration."""

import dataclasses

import pytest

from stableswap.config import DEFAULT_POOL_CONFIG, PoolConfig
from stableswap.constants import MAX_AMPLIFICATION
from stableswap.errors import PoolNotInitialized
from stableswap.math.fixed_point import FixedPoint
from stableswap.state import PoolAccount, SwapDirection
from tests.helpers import make_pool_state


class TestSwapDirection:
    def test_reverse(self):
        assert SwapDirection.A_TO_B.reverse is SwapDirection.B_TO_A
        assert SwapDirection.B_TO_A.reverse is SwapDirection.A_TO_B


class TestPoolState:
    """Tests for the immutable state snapshot."""

    def test_frozen(self):
        state = make_pool_state()
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.reserve_a = 0

    def test_reserves_for(self):
        state = make_pool_state(reserve_a=1_000, reserve_b=2_000)
        assert state.reserves_for(SwapDirection.A_TO_B) == (1_000, 2_000)
        assert state.reserves_for(SwapDirection.B_TO_A) == (2_000, 1_000)

    def test_with_reserves_a_to_b(self):
        state = make_pool_state(reserve_a=1_000, reserve_b=2_000)
        updated = state.with_reserves(SwapDirection.A_TO_B, 1_100, 1_900)
        assert (updated.reserve_a, updated.reserve_b) == (1_100, 1_900)
        assert (state.reserve_a, state.reserve_b) == (1_000, 2_000)

    def test_with_reserves_b_to_a(self):
        state = make_pool_state(reserve_a=1_000, reserve_b=2_000)
        updated = state.with_reserves(SwapDirection.B_TO_A, 2_100, 900)
        assert (updated.reserve_a, updated.reserve_b) == (900, 2_100)
        assert updated.lp_supply == state.lp_supply

    def test_invariant(self):
        assert make_pool_state().invariant() == 2_000_000


class TestPoolAccount:
    """Tests for the storage slot."""

    def test_empty(self):
        account = PoolAccount(address="empty")
        assert not account.is_initialized
        with pytest.raises(PoolNotInitialized):
            account.load()

    def test_commit_replaces_state(self):
        state = make_pool_state()
        account = PoolAccount(address="slot")
        account.commit(state)
        assert account.is_initialized
        assert account.load() is state


class TestPoolConfig:
    """Tests for pool creation policy."""

    def test_defaults(self):
        assert DEFAULT_POOL_CONFIG.default_fee_rate == FixedPoint.from_bps(30)
        assert DEFAULT_POOL_CONFIG.max_fee_rate == FixedPoint.from_bps(1_000)
        assert DEFAULT_POOL_CONFIG.max_amplification == MAX_AMPLIFICATION

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"min_amplification": 0},
            {"min_amplification": 500, "max_amplification": 100},
            {"max_amplification": MAX_AMPLIFICATION + 1},
            {"max_fee_rate": FixedPoint.from_int(1)},
            {"default_fee_rate": FixedPoint.from_bps(2_000)},
        ],
    )
    def test_invalid_settings_rejected(self, kwargs):
        with pytest.raises(ValueError):
            PoolConfig(**kwargs)
