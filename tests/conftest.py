"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from stableswap.state import PoolAccount
from tests.helpers import POOL_ADDRESS, make_pool_account


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog.configure() a test (e.g. the CLI) performed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def empty_account() -> PoolAccount:
    """Pool account that holds no state yet."""
    return PoolAccount(address=POOL_ADDRESS)


@pytest.fixture
def pool_account() -> PoolAccount:
    """1,000,000 / 1,000,000 pool, A=100, 0.3% fee."""
    return make_pool_account()
