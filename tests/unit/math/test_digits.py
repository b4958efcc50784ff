"""Tests for uncapped decimal digit helpers."""

import pytest

from graphnum.math.digits import digit_count, format_digits, parse_digits


class TestDigitCount:
    """Tests for digit_count()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0, 1), (9, 1), (10, 2), (99, 2), (100, 3), (-999, 3), (10**33, 34), (10**34 - 1, 34)],
    )
    def test_small_values(self, value, expected):
        assert digit_count(value) == expected

    def test_values_beyond_str_cap(self):
        """Counts are exact around large powers of ten."""
        assert digit_count(10**5000) == 5001
        assert digit_count(10**5000 - 1) == 5000
        assert digit_count(-(10**12287)) == 12288


class TestConversions:
    """Tests for parse_digits() and format_digits()."""

    def test_parse_small(self):
        assert parse_digits("000123") == 123

    def test_parse_large(self):
        assert parse_digits("1" + "0" * 4999) == 10**4999

    def test_format_small(self):
        assert format_digits(123) == "123"
        assert format_digits(0) == "0"

    def test_format_large(self):
        assert format_digits(10**5000) == "1" + "0" * 5000

    def test_format_keeps_inner_zeros(self):
        """Low chunks are zero-padded back to their width."""
        assert format_digits(10**3000 + 7) == "1" + "0" * 2999 + "7"

    def test_round_trip(self):
        literal = "123456789" * 700
        assert format_digits(parse_digits(literal)) == literal
