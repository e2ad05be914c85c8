"""Protocol constants for the stable swap pool.

Changing any value here changes the protocol: two validators running with
different constants would price the same trade differently.
"""

# Fixed-point scale shared by every FixedPoint value (18 decimals)
FIXED_POINT_DECIMALS = 18
ONE = 10**FIXED_POINT_DECIMALS

# Fees are quoted in basis points of FEE_DENOMINATOR
FEE_DENOMINATOR = 10_000
DEFAULT_FEE_BPS = 30  # 0.3%

# Two-asset pools only
N_COINS = 2

# Newton-Raphson bounds for the invariant and balance solvers
MAX_ITERATIONS = 255
CONVERGENCE_TOLERANCE = 1

# Amplification range for which the solvers are known to converge
MIN_AMPLIFICATION = 1
MAX_AMPLIFICATION = 1_000_000

# Integer widths
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1
U256_MAX = 2**256 - 1
