"""Tests for the host function table."""

import pytest

from graphnum.errors import DivisionByZero, IntegerOverflow, ParseError, UnknownHostFunction
from graphnum.host.exports import HostExports, get_default_exports
from tests.helpers import BIG_INT_16, NINES_35, ONE_THEN_35_ZEROS


class TestBigIntFunctions:
    """BigInt host functions over string arguments."""

    @pytest.mark.parametrize(
        ("name", "args", "expected"),
        [
            ("bigInt.fromString", ["+0042"], "42"),
            ("bigInt.plus", ["1", "2"], "3"),
            ("bigInt.minus", ["1", "2"], "-1"),
            ("bigInt.times", ["-3", "4"], "-12"),
            ("bigInt.dividedBy", ["-7", "2"], "-3"),
            ("bigInt.mod", ["-7", "2"], "-1"),
            ("bigInt.pow", ["2", "10"], "1024"),
            ("bigInt.bitOr", [BIG_INT_16, "42"], "8888888888888890"),
            ("bigInt.bitAnd", [BIG_INT_16, "42"], "40"),
            ("bigInt.leftShift", [BIG_INT_16, "6"], "568888888888888832"),
            ("bigInt.rightShift", [BIG_INT_16, "6"], "138888888888888"),
            ("bigInt.dividedByDecimal", ["1", "8"], "0.125"),
            ("bigInt.toHex", ["255"], "0xff"),
        ],
    )
    def test_call(self, exports, name, args, expected):
        assert exports.call(name, args) == expected

    @pytest.mark.parametrize("amount", ["256", "-1"])
    def test_shift_amount_must_fit_u8(self, exports, amount):
        with pytest.raises(IntegerOverflow):
            exports.call("bigInt.leftShift", ["1", amount])

    @pytest.mark.parametrize("exponent", ["256", "200000", "-1"])
    def test_pow_exponent_must_fit_u8(self, exports, exponent):
        with pytest.raises(IntegerOverflow):
            exports.call("bigInt.pow", ["10", exponent])

    def test_pow_max_exponent(self, exports):
        assert exports.call("bigInt.pow", ["2", "255"]) == str(2**255)

    def test_division_by_zero_propagates(self, exports):
        with pytest.raises(DivisionByZero):
            exports.call("bigInt.dividedBy", ["1", "0"])


class TestBigDecimalFunctions:
    """BigDecimal host functions over string arguments."""

    @pytest.mark.parametrize(
        ("name", "args", "expected"),
        [
            ("bigDecimal.fromString", [NINES_35], ONE_THEN_35_ZEROS),
            ("bigDecimal.toString", ["1e3"], "1000"),
            ("bigDecimal.plus", ["1.5", "0.25"], "1.75"),
            ("bigDecimal.minus", ["1", "1.5"], "-0.5"),
            ("bigDecimal.times", ["1.5", "2"], "3.0"),
            ("bigDecimal.dividedBy", ["1", "10"], "0.1"),
            ("bigDecimal.equals", [NINES_35, ONE_THEN_35_ZEROS], "true"),
            ("bigDecimal.equals", ["1.5", "1.50"], "true"),
            ("bigDecimal.equals", ["1.5", "1.51"], "false"),
        ],
    )
    def test_call(self, exports, name, args, expected):
        assert exports.call(name, args) == expected

    def test_division_by_zero_propagates(self, exports):
        with pytest.raises(DivisionByZero):
            exports.call("bigDecimal.dividedBy", ["1", "0.0"])

    def test_parse_error_propagates(self, exports):
        with pytest.raises(ParseError):
            exports.call("bigDecimal.plus", ["1", "one"])


class TestRegistry:
    """Tests for registration and dispatch."""

    def test_unknown_function_raises(self, exports):
        with pytest.raises(UnknownHostFunction):
            exports.call("bigInt.frobnicate", [])

    def test_unknown_function_is_lookup_error(self, exports):
        with pytest.raises(LookupError):
            exports.call("nope", [])

    def test_arity_mismatch_raises(self, exports):
        with pytest.raises(TypeError):
            exports.call("bigInt.plus", ["1"])

    def test_names_sorted(self, exports):
        names = exports.names()
        assert names == sorted(names)
        assert "bigInt.plus" in names
        assert "bigDecimal.dividedBy" in exports

    def test_register_custom(self):
        exports = HostExports(register_defaults=False)
        assert exports.names() == []
        exports.register("echo", 1, lambda s: s)
        assert exports.call("echo", ["x"]) == "x"

    def test_register_replaces(self, exports):
        exports.register("bigInt.plus", 2, lambda a, b: "replaced")
        assert exports.call("bigInt.plus", ["1", "2"]) == "replaced"

    def test_default_exports_shared(self):
        assert get_default_exports() is get_default_exports()
        assert "bigInt.fromString" in get_default_exports()

    def test_call_is_logged(self, exports, capsys):
        exports.call("bigInt.plus", ["1", "2"])
        captured = capsys.readouterr()
        assert "host_call" in captured.out
