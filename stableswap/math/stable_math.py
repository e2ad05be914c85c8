"""StableSwap invariant math for two-asset pools.

Core math functions for the amplified (Curve-style) invariant:

    A*n^n*(x + y) + D = A*D*n^n + D^(n+1) / (n^n * x * y)

Both D and the unknown balance y are found by Newton-Raphson iteration in
checked integer arithmetic. All intermediates live in the 256-bit SafeInt
register; inputs and outputs are uint64 token amounts.

IMPORTANT: Rounding always favors the pool. D is rounded down, the solved
balance y is rounded up, and a swap keeps one extra unit of output, so a
fee-free trade can never shrink the invariant.
"""

import structlog

from stableswap.constants import (
    CONVERGENCE_TOLERANCE,
    MAX_AMPLIFICATION,
    MAX_ITERATIONS,
    MIN_AMPLIFICATION,
    N_COINS,
    ONE,
)
from stableswap.errors import (
    ConvergenceFailure,
    DegenerateSwap,
    InsufficientLiquidity,
    InvalidAmount,
    InvalidAmplification,
    InvalidFeeRate,
)
from stableswap.math.fixed_point import FixedPoint
from stableswap.safe_int import S, SafeInt

logger = structlog.get_logger()


def _validate_amplification(amplification: int) -> None:
    if not MIN_AMPLIFICATION <= amplification <= MAX_AMPLIFICATION:
        raise InvalidAmplification(
            f"Amplification must be in [{MIN_AMPLIFICATION}, {MAX_AMPLIFICATION}], "
            f"got {amplification}"
        )


def _ann(amplification: int) -> SafeInt:
    """A * n^n, the amplification term of the invariant."""
    return S(amplification) * S(N_COINS**N_COINS)


def compute_invariant(reserve_a: int, reserve_b: int, amplification: int) -> int:
    """Calculate the StableSwap invariant D using Newton-Raphson iteration.

    Algorithm:
        1. Initial guess: D = reserve_a + reserve_b (constant-sum limit)
        2. D_P = D^(n+1) / (n^n * x * y), as a single division
        3. D' = (Ann*S + n*D_P) * D / ((Ann - 1)*D + (n + 1)*D_P)
        4. Stop when |D' - D| <= CONVERGENCE_TOLERANCE

    Args:
        reserve_a: Pool balance of token A
        reserve_b: Pool balance of token B
        amplification: Amplification coefficient A (unscaled)

    Returns:
        The invariant D

    Raises:
        InvalidAmount: If either reserve is zero
        InvalidAmplification: If amplification is outside the supported range
        ConvergenceFailure: If iteration doesn't converge in MAX_ITERATIONS
    """
    if reserve_a <= 0 or reserve_b <= 0:
        raise InvalidAmount(f"Reserves must be positive, got ({reserve_a}, {reserve_b})")
    _validate_amplification(amplification)

    balances = (S(reserve_a), S(reserve_b))
    sum_balances = balances[0] + balances[1]
    # n^n * x * y; D^(n+1) stays below 2^195 for uint64 reserves
    prod_term = balances[0] * balances[1] * N_COINS**N_COINS
    ann = _ann(amplification)

    d = sum_balances
    for _ in range(MAX_ITERATIONS):
        # Chained floors on raw unit balances drift enough to trap D in a cycle
        d_p = d ** (N_COINS + 1) // prod_term
        d_prev = d

        numerator = (ann * sum_balances + d_p * N_COINS) * d
        denominator = (ann - 1) * d + d_p * (N_COINS + 1)
        d = numerator // denominator

        if d.abs_diff(d_prev) <= CONVERGENCE_TOLERANCE:
            return d.value

    logger.debug(
        "invariant_did_not_converge",
        reserve_a=reserve_a,
        reserve_b=reserve_b,
        amplification=amplification,
        last_estimate=d.value,
    )
    raise ConvergenceFailure(f"Invariant did not converge after {MAX_ITERATIONS} iterations")


def compute_y(new_reserve_in: int, invariant: int, amplification: int) -> int:
    """Solve for the other reserve given one reserve and the invariant D.

    Rearranging the invariant for the unknown balance y gives

        y^2 + (b - D)*y = c,   b = x + D/Ann,   c = D^(n+1) / (n^n * x * Ann)

    which is solved by y' = (y^2 + c) / (2y + b - D), starting from y = D.
    c and every step are rounded up and b is rounded down, so the result is
    never below the exact root.

    Args:
        new_reserve_in: The known reserve x (after the trade)
        invariant: The invariant D to preserve
        amplification: Amplification coefficient A (unscaled)

    Returns:
        The balance y as an integer

    Raises:
        InvalidAmount: If new_reserve_in or invariant is zero
        InvalidAmplification: If amplification is outside the supported range
        ConvergenceFailure: If iteration doesn't converge in MAX_ITERATIONS
    """
    if new_reserve_in <= 0 or invariant <= 0:
        raise InvalidAmount(
            f"Reserve and invariant must be positive, got ({new_reserve_in}, {invariant})"
        )
    _validate_amplification(amplification)

    x = S(new_reserve_in)
    d = S(invariant)
    ann = _ann(amplification)

    c = (d * d).ceiling_div(x * N_COINS)
    c = (c * d).ceiling_div(ann * N_COINS)
    b = x + d // ann

    y = d
    for _ in range(MAX_ITERATIONS):
        y_prev = y
        twice_y_plus_b = y * 2 + b
        if twice_y_plus_b <= d:
            raise ConvergenceFailure("Balance solver denominator became non-positive")
        y = (y * y + c).ceiling_div(twice_y_plus_b - d)

        if y.abs_diff(y_prev) <= CONVERGENCE_TOLERANCE:
            return y.value

    logger.debug(
        "balance_did_not_converge",
        new_reserve_in=new_reserve_in,
        invariant=invariant,
        amplification=amplification,
        last_estimate=y.value,
    )
    raise ConvergenceFailure(f"Balance did not converge after {MAX_ITERATIONS} iterations")


def compute_swap_output(
    reserve_in: int,
    reserve_out: int,
    amount_in: int,
    amplification: int,
) -> int:
    """Calculate the output amount for an exact input.

    Fee should be subtracted from amount_in BEFORE calling this function.

    Algorithm:
        1. Calculate D from the pre-trade reserves
        2. Solve for reserve_out after reserve_in grows by amount_in
        3. Return: reserve_out - new_reserve_out - 1 (1 unit rounding margin)

    Returns:
        Output amount, always > 0

    Raises:
        InvalidAmount: If amount_in or a reserve is zero
        DegenerateSwap: If the input is too small to buy a single unit
        ConvergenceFailure: If either solve doesn't converge
    """
    if amount_in <= 0:
        raise InvalidAmount(f"amount_in must be positive, got {amount_in}")

    invariant = compute_invariant(reserve_in, reserve_out, amplification)
    new_reserve_in = S(reserve_in) + S(amount_in)
    new_reserve_out = compute_y(new_reserve_in.value, invariant, amplification)

    if new_reserve_out + 1 >= reserve_out:
        raise DegenerateSwap(
            f"Input {amount_in} buys nothing against reserves ({reserve_in}, {reserve_out})"
        )
    return reserve_out - new_reserve_out - 1


def compute_swap_input(
    reserve_in: int,
    reserve_out: int,
    amount_out: int,
    amplification: int,
) -> int:
    """Calculate the input amount needed for an exact output.

    Fee should be added to the result AFTER calling this function.

    Returns:
        Input amount before fees: new_reserve_in - reserve_in + 1

    Raises:
        InvalidAmount: If amount_out or a reserve is zero
        InsufficientLiquidity: If amount_out >= reserve_out
        ConvergenceFailure: If either solve doesn't converge
    """
    if amount_out <= 0:
        raise InvalidAmount(f"amount_out must be positive, got {amount_out}")
    if amount_out >= reserve_out:
        raise InsufficientLiquidity(
            f"amount_out {amount_out} must be less than reserve_out {reserve_out}"
        )

    invariant = compute_invariant(reserve_in, reserve_out, amplification)
    new_reserve_out = S(reserve_out) - S(amount_out)
    new_reserve_in = compute_y(new_reserve_out.value, invariant, amplification)

    return (S(new_reserve_in) - S(reserve_in) + 1).value


def _validate_fee_rate(fee_rate: FixedPoint) -> None:
    if fee_rate.value >= ONE:
        raise InvalidFeeRate(f"Fee rate must be in range [0, 1), got {fee_rate}")


def subtract_fee(amount_in: int, fee_rate: FixedPoint) -> tuple[int, int]:
    """Split an input amount into (amount_after_fee, fee_amount).

    The fee is rounded up, so any positive rate charges at least one unit
    on any positive amount.

    Raises:
        InvalidFeeRate: If fee_rate is not in range [0, 1)
    """
    _validate_fee_rate(fee_rate)
    fee_amount = fee_rate.mul_int_up(amount_in)
    return (S(amount_in) - S(fee_amount)).value, fee_amount


def add_fee(amount: int, fee_rate: FixedPoint) -> int:
    """Gross up a pre-fee input amount: amount / (1 - fee), rounded up.

    Raises:
        InvalidFeeRate: If fee_rate is not in range [0, 1)
    """
    _validate_fee_rate(fee_rate)
    complement = fee_rate.complement()
    return (S(amount) * S(ONE)).ceiling_div(complement.value).value
