"""Pool configuration."""

from dataclasses import dataclass, field

from stableswap.constants import DEFAULT_FEE_BPS, MAX_AMPLIFICATION, MIN_AMPLIFICATION
from stableswap.math.fixed_point import FixedPoint


@dataclass(frozen=True)
class PoolConfig:
    """Policy applied when pools are created.

    Protocol constants (scale, iteration bounds) live in constants.py and
    are not configurable. This dataclass only holds the choices a pool
    operator agrees to at initialization, making it easy to test with
    different settings.

    Attributes:
        default_fee_rate: Fee charged on input when the caller doesn't
            specify one (default: 0.3%)
        min_amplification: Smallest accepted amplification coefficient
        max_amplification: Largest accepted amplification coefficient.
            Must not exceed MAX_AMPLIFICATION, the range in which the
            solvers are known to converge.
        max_fee_rate: Largest accepted fee rate (must stay below 1)
    """

    default_fee_rate: FixedPoint = field(default_factory=lambda: FixedPoint.from_bps(DEFAULT_FEE_BPS))
    min_amplification: int = MIN_AMPLIFICATION
    max_amplification: int = MAX_AMPLIFICATION
    max_fee_rate: FixedPoint = field(default_factory=lambda: FixedPoint.from_bps(1_000))

    def __post_init__(self) -> None:
        if not MIN_AMPLIFICATION <= self.min_amplification <= self.max_amplification:
            raise ValueError(
                f"Invalid amplification bounds [{self.min_amplification}, {self.max_amplification}]"
            )
        if self.max_amplification > MAX_AMPLIFICATION:
            raise ValueError(f"max_amplification cannot exceed {MAX_AMPLIFICATION}")
        if self.max_fee_rate.value >= FixedPoint.ONE:
            raise ValueError("max_fee_rate must be below 1")
        if self.default_fee_rate > self.max_fee_rate:
            raise ValueError("default_fee_rate exceeds max_fee_rate")


# Default configuration instance
DEFAULT_POOL_CONFIG = PoolConfig()
