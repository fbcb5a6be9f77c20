"""
Tests for Numerical Safeguards

Checks:
1. Float validity and tolerant comparison
2. Validation helpers (positive / non-negative / range)
3. Half-up money rounding used at the presentation and payment boundaries
"""

import math
from decimal import Decimal

import pytest

from shipquote.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    round_money,
    validate_in_range,
    validate_non_negative,
    validate_positive,
)


class TestFloatChecks:
    """Tests for is_valid_float / is_close"""

    def test_finite_values_are_valid(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1.5)
        assert is_valid_float(655.957)

    def test_nan_and_inf_are_invalid(self) -> None:
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)

    def test_is_close_within_relative_tolerance(self) -> None:
        assert is_close(1.0, 1.0 + EPS_FLOAT_COMPARE_REL / 10)
        assert is_close(52476.56, 52476.56 * (1 + 1e-12))

    def test_is_close_rejects_distinct_values(self) -> None:
        assert not is_close(1.0, 1.1)
        assert not is_close(69.99, 70.0)


class TestValidation:
    """Tests for the validate_* helpers"""

    def test_validate_positive_accepts_positive(self) -> None:
        validate_positive(8.0, "rate")

    @pytest.mark.parametrize("value", [0.0, -1.0, math.nan, math.inf])
    def test_validate_positive_rejects(self, value: float) -> None:
        with pytest.raises(ValueError, match="rate"):
            validate_positive(value, "rate")

    def test_validate_non_negative_accepts_zero(self) -> None:
        validate_non_negative(0.0, "weight")

    def test_validate_non_negative_rejects_negative(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            validate_non_negative(-0.01, "weight")

    def test_validate_in_range_bounds_inclusive(self) -> None:
        validate_in_range(0.0, "insurance_rate", 0.0, 1.0)
        validate_in_range(1.0, "insurance_rate", 0.0, 1.0)

    def test_validate_in_range_rejects_outside(self) -> None:
        with pytest.raises(ValueError, match="<= 1.0"):
            validate_in_range(1.2, "insurance_rate", 0.0, 1.0)
        with pytest.raises(ValueError, match=">= 0.0"):
            validate_in_range(-0.2, "insurance_rate", 0.0, 1.0)


class TestRoundMoney:
    """Tests for round_money"""

    def test_two_decimal_places(self) -> None:
        assert round_money(62971.872) == Decimal("62971.87")
        assert round_money(50.0) == Decimal("50.00")

    def test_half_up_on_decimal_representation(self) -> None:
        # 2.675 is stored as 2.67499999... in binary; repr-based rounding gives 2.68
        assert round_money(2.675) == Decimal("2.68")
        assert round_money(0.125) == Decimal("0.13")

    def test_custom_places(self) -> None:
        assert round_money(10495.312, places=1) == Decimal("10495.3")
        assert round_money(1.5, places=0) == Decimal("2")

    def test_keeps_trailing_zeros(self) -> None:
        assert str(round_money(56.0)) == "56.00"

    def test_rejects_nan(self) -> None:
        with pytest.raises(ValueError, match="NaN/Inf"):
            round_money(math.nan)

    def test_rejects_negative_places(self) -> None:
        with pytest.raises(ValueError, match="places"):
            round_money(1.0, places=-1)

    def test_beyond_default_decimal_precision(self) -> None:
        assert round_money(1e30) == Decimal("1000000000000000000000000000000.00")
        assert round_money(5.2476560000000005e33).as_tuple().exponent == -2

    def test_largest_float(self) -> None:
        rounded = round_money(1.7976931348623157e308)
        assert rounded.as_tuple().exponent == -2
        assert rounded.adjusted() == 308
