"""Tests for decimal renormalization.

Covers the three envelope rules: the 34-digit bound with round-half-up and
carry, exponent overflow (pad, then saturate) and exponent underflow (drop
digits down to the minimum exponent).
"""

import pytest

from graphnum.config import DecimalConfig
from graphnum.math.rounding import drop_digits, is_normalized, renormalize
from tests.helpers import MAX_EXP, MAX_SIGNIFICAND, MIN_EXP


class TestDropDigits:
    """Round-half-up on the most significant dropped digit."""

    @pytest.mark.parametrize(
        ("magnitude", "count", "expected"),
        [
            (88888, 1, 8889),
            (99999, 1, 10000),
            (12349, 2, 123),
            (12350, 2, 124),
            (12345, 0, 12345),
            (5, 1, 1),
            (4, 1, 0),
            (5, 2, 0),
            (0, 3, 0),
        ],
    )
    def test_drop(self, magnitude, count, expected):
        assert drop_digits(magnitude, count) == expected

    def test_only_first_dropped_digit_decides(self):
        """Dropped 49 rounds down, dropped 50 rounds up."""
        assert drop_digits(1449, 2) == 14
        assert drop_digits(1450, 2) == 15

    def test_exact_half_rounds_up(self):
        assert drop_digits(25, 1) == 3
        assert drop_digits(35, 1) == 4


class TestPrecisionBound:
    """Significands above 34 digits are rounded."""

    def test_thirty_five_nines_carry(self):
        """A carry across every digit adds a digit, which is dropped too."""
        assert renormalize(int("9" * 35), 0) == (10**33, 2)

    def test_thirty_five_eights(self):
        assert renormalize(int("8" * 35), 0) == (int("8" * 33 + "9"), 1)

    def test_negative_rounds_magnitude(self):
        """Negative values round half away from zero."""
        assert renormalize(-int("8" * 35), 0) == (-int("8" * 33 + "9"), 1)

    def test_many_excess_digits(self):
        digits = int("1" * 34 + "5" + "0" * 20)
        assert renormalize(digits, -3) == (int("1" * 33 + "2"), 18)

    def test_thirty_four_digits_unchanged(self):
        assert renormalize(MAX_SIGNIFICAND, 0) == (MAX_SIGNIFICAND, 0)

    def test_trailing_zeros_kept(self):
        assert renormalize(1500, -3) == (1500, -3)


class TestExponentOverflow:
    """Exponents above the maximum pad, then saturate."""

    def test_pads_significand_when_room(self):
        assert renormalize(1, MAX_EXP + 1) == (10, MAX_EXP)

    def test_saturates_when_full(self):
        assert renormalize(10**33, MAX_EXP + 1) == (MAX_SIGNIFICAND, MAX_EXP)

    def test_saturates_negative(self):
        assert renormalize(-5, 7000) == (-MAX_SIGNIFICAND, MAX_EXP)

    def test_zero_clamps_exponent(self):
        assert renormalize(0, 7000) == (0, MAX_EXP)


class TestExponentUnderflow:
    """Exponents below the minimum drop digits."""

    def test_rounds_into_range(self):
        """35 digits at -6144: the 8 is dropped and the 6 rounds to 7."""
        digits = int("9" * 33 + "68")
        assert renormalize(digits, MIN_EXP - 1) == (int("9" * 33 + "7"), MIN_EXP)

    def test_drops_below_minimum(self):
        assert renormalize(15, MIN_EXP - 1) == (2, MIN_EXP)
        assert renormalize(125, MIN_EXP - 2) == (1, MIN_EXP)

    def test_carry_at_minimum(self):
        assert renormalize(9999, MIN_EXP - 2) == (100, MIN_EXP)

    def test_single_digit_rounding(self):
        assert renormalize(5, MIN_EXP - 1) == (1, MIN_EXP)
        assert renormalize(4, MIN_EXP - 1) == (0, MIN_EXP)

    def test_far_below_minimum_is_zero(self):
        assert renormalize(5, MIN_EXP - 2) == (0, MIN_EXP)
        assert renormalize(MAX_SIGNIFICAND, -(10**9)) == (0, MIN_EXP)

    def test_zero_clamps_exponent(self):
        assert renormalize(0, -7000) == (0, MIN_EXP)


class TestIdempotence:
    """Renormalizing normalized input is a no-op."""

    @pytest.mark.parametrize(
        ("digits", "exp"),
        [
            (int("9" * 35), 0),
            (-int("8" * 35), 5),
            (1, 7000),
            (9999, MIN_EXP - 2),
            (0, 0),
            (1500, -3),
        ],
    )
    def test_second_pass_unchanged(self, digits, exp):
        once = renormalize(digits, exp)
        assert renormalize(*once) == once
        assert is_normalized(*once)

    def test_is_normalized_detects_violations(self):
        assert not is_normalized(int("9" * 35), 0)
        assert not is_normalized(1, MAX_EXP + 1)
        assert not is_normalized(1, MIN_EXP - 1)


class TestCustomConfig:
    """Renormalization honors a non-default envelope."""

    def test_small_precision(self):
        config = DecimalConfig(precision=3, min_exp=-5, max_exp=5)
        assert renormalize(12345, 0, config) == (123, 2)
        assert renormalize(1, 7, config) == (100, 5)
        assert renormalize(1, 8, config) == (999, 5)

    def test_invalid_config_raises(self):
        with pytest.raises(ValueError):
            DecimalConfig(precision=0)
        with pytest.raises(ValueError):
            DecimalConfig(min_exp=10, max_exp=0)


class TestLogging:
    """Soft conditions are logged, never raised."""

    def test_rounding_is_logged(self, capsys):
        renormalize(int("9" * 35), 0)
        captured = capsys.readouterr()
        assert "big_decimal_rounded" in captured.out

    def test_clamping_is_logged(self, capsys):
        renormalize(10**33, MAX_EXP + 1)
        captured = capsys.readouterr()
        assert "big_decimal_exponent_clamped" in captured.out

    def test_normalized_input_is_silent(self, capsys):
        renormalize(15, -1)
        captured = capsys.readouterr()
        assert captured.out == ""
