"""Tests for FixedPoint checked arithmetic."""

from decimal import Decimal

import pytest

from stableswap.constants import ONE, U128_MAX
from stableswap.errors import DivisionByZero, Overflow, Underflow
from stableswap.math.fixed_point import FixedPoint


class TestFixedPointConstruction:
    """Tests for constructors and bounds."""

    def test_from_int(self):
        assert FixedPoint.from_int(3).value == 3 * ONE

    def test_from_bps(self):
        """30 bps is 0.003."""
        assert FixedPoint.from_bps(30).value == 3 * 10**15
        assert FixedPoint.from_bps(30).to_decimal() == Decimal("0.003")

    def test_from_fraction_rounds_toward_zero(self):
        """1/3 truncates at the 18th decimal."""
        assert FixedPoint.from_fraction(1, 3).value == ONE // 3

    def test_from_fraction_zero_denominator_raises(self):
        with pytest.raises(DivisionByZero):
            FixedPoint.from_fraction(1, 0)

    def test_negative_raises(self):
        with pytest.raises(Underflow):
            FixedPoint(-1)

    def test_above_128_bits_raises(self):
        assert FixedPoint(U128_MAX).value == U128_MAX
        with pytest.raises(Overflow):
            FixedPoint(U128_MAX + 1)

    def test_from_int_overflow_raises(self):
        with pytest.raises(Overflow):
            FixedPoint.from_int(U128_MAX)

    def test_from_raw_keeps_scaled_value(self):
        """from_raw takes a value already multiplied by ONE."""
        assert FixedPoint.from_raw(3 * 10**15) == FixedPoint.from_bps(30)
        with pytest.raises(Overflow):
            FixedPoint.from_raw(U128_MAX + 1)

    @pytest.mark.parametrize("value", [0.5, "1", True, None])
    def test_non_int_raises(self, value):
        """Floats, strings and bools are never stored as a raw value."""
        with pytest.raises(TypeError):
            FixedPoint(value)  # type: ignore[arg-type]


class TestFixedPointArithmetic:
    """Tests for checked arithmetic and rounding."""

    def test_add(self):
        assert (FixedPoint.from_int(1) + FixedPoint.from_int(2)) == FixedPoint.from_int(3)

    def test_add_overflow_raises(self):
        with pytest.raises(Overflow):
            FixedPoint(U128_MAX) + FixedPoint(1)

    def test_sub(self):
        assert (FixedPoint.from_int(5) - FixedPoint.from_int(3)) == FixedPoint.from_int(2)

    def test_sub_underflow_raises(self):
        """Subtraction never clamps; it fails."""
        with pytest.raises(Underflow):
            FixedPoint.from_int(3) - FixedPoint.from_int(5)

    def test_mul_down(self):
        """Multiplication rounds toward zero."""
        a = FixedPoint(ONE + 1)
        # (10^18 + 1)^2 / 10^18 = 10^18 + 2 + 1/10^18
        assert a.mul_down(a).value == ONE + 2
        assert (a * a).value == ONE + 2

    def test_mul_up(self):
        """Multiplication can round up explicitly."""
        a = FixedPoint(ONE + 1)
        assert a.mul_up(a).value == ONE + 3

    def test_div_down(self):
        two = FixedPoint.from_int(2)
        assert (FixedPoint.from_int(1) / two).value == ONE // 2
        assert FixedPoint(1).div_down(FixedPoint.from_int(3)).value == 0

    def test_div_up(self):
        assert FixedPoint(1).div_up(FixedPoint.from_int(3)).value == 1

    def test_div_by_zero_raises(self):
        with pytest.raises(DivisionByZero):
            FixedPoint.from_int(1).div_down(FixedPoint(0))
        with pytest.raises(DivisionByZero):
            FixedPoint.from_int(1).div_up(FixedPoint(0))

    def test_mul_promotes_intermediate(self):
        """A product that overflows 128 bits before rescaling still succeeds."""
        big = FixedPoint(U128_MAX)
        assert (big * FixedPoint.from_int(1)).value == U128_MAX
        assert big.div_down(FixedPoint.from_int(1)).value == U128_MAX

    def test_mul_result_overflow_raises(self):
        """A result that does not fit 128 bits fails rather than wrapping."""
        with pytest.raises(Overflow):
            FixedPoint(U128_MAX) * FixedPoint.from_int(2)

    def test_complement(self):
        assert FixedPoint.from_bps(30).complement() == FixedPoint.from_bps(9_970)
        assert FixedPoint.from_int(1).complement() == FixedPoint(0)

    def test_complement_above_one_raises(self):
        with pytest.raises(Underflow):
            FixedPoint.from_int(2).complement()

    def test_mul_int(self):
        """Applying a fraction to a token amount."""
        fee = FixedPoint.from_bps(30)
        assert fee.mul_int_down(1_000) == 3
        assert fee.mul_int_down(999) == 2
        assert fee.mul_int_up(999) == 3
        assert fee.mul_int_up(1) == 1
        assert FixedPoint(0).mul_int_up(1_000) == 0


class TestFixedPointComparison:
    """Tests for comparisons."""

    def test_ordering(self):
        small = FixedPoint.from_bps(10)
        large = FixedPoint.from_bps(20)
        assert small < large
        assert small <= large
        assert large > small
        assert large >= small
        assert small == FixedPoint.from_bps(10)

    def test_compare_with_other_type(self):
        assert (FixedPoint(1) == 1) is False

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(FixedPoint(1))
