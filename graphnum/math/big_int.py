"""Arbitrary-precision signed integer.

BigInt is an immutable value type over Python's native int, whose storage is
already a growable vector of fixed-width limbs plus a sign. The wrapper pins
down the semantics mapping code relies on:

- `/` truncates toward zero and `%` is its paired remainder (sign follows the
  dividend); `//` and `divmod` keep Python's floor convention
- `&`, `|`, `^`, `~` act on the infinite two's-complement bit pattern
- `<<` multiplies by 2^n without truncation, `>>` floor-divides by 2^n
- division or modulo by zero raises DivisionByZero
- word conversions (`to_i32`, `to_u64`, ...) are checked

Usage pattern:
    from graphnum.math.big_int import BigInt

    value = BigInt.from_string("8888888888888888")
    assert value | BigInt.from_i32(42) == BigInt.from_string("8888888888888890")
    assert value >> 6 == BigInt.from_string("138888888888888")
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

from graphnum.constants import I32_MAX, I32_MIN, I64_MAX, I64_MIN, U32_MAX, U64_MAX
from graphnum.errors import DivisionByZero, IntegerOverflow, NegativeOperand, ParseError
from graphnum.math.digits import format_digits, parse_digits

if TYPE_CHECKING:
    from graphnum.math.big_decimal import BigDecimal

__all__ = ["BigInt"]

# ASCII only: str.isdigit() and int() both accept non-ASCII digits
_INT_LITERAL = re.compile(r"([+-])?([0-9]+)")
_HEX_LITERAL = re.compile(r"(-)?0[xX]([0-9a-fA-F]+)")


class BigInt:
    """Immutable arbitrary-precision signed integer.

    Operators accept another BigInt or a native int on either side.
    Unsupported operand types return NotImplemented so that BigDecimal's
    reflected operators take over for mixed expressions.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | BigInt = 0) -> None:
        """Create a BigInt from a native integer or another BigInt.

        Raises:
            TypeError: If value is not an int or BigInt (bool is rejected)
        """
        if isinstance(value, BigInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"BigInt requires int, got {type(value).__name__}")

    # --- Construction ---

    @classmethod
    def from_string(cls, s: str) -> BigInt:
        """Parse an optionally signed base-10 literal.

        Args:
            s: Literal such as "8888", "-42" or "+7"

        Raises:
            ParseError: On empty input, a stray sign or any non-digit character
        """
        if not isinstance(s, str):
            raise ParseError(f"BigInt literal must be a string, got {type(s).__name__}")
        match = _INT_LITERAL.fullmatch(s)
        if match is None:
            raise ParseError(f"Invalid BigInt literal: {s!r}")
        magnitude = parse_digits(match.group(2))
        return cls(-magnitude if match.group(1) == "-" else magnitude)

    @classmethod
    def from_hex(cls, s: str) -> BigInt:
        """Parse a 0x-prefixed hex literal, optionally preceded by '-'."""
        match = _HEX_LITERAL.fullmatch(s) if isinstance(s, str) else None
        if match is None:
            raise ParseError(f"Invalid hex literal: {s!r}")
        magnitude = int(match.group(2), 16)
        return cls(-magnitude if match.group(1) else magnitude)

    @classmethod
    def from_i32(cls, value: int) -> BigInt:
        """Create from a signed 32-bit integer."""
        return cls(_check_word(value, I32_MIN, I32_MAX, "i32"))

    @classmethod
    def from_u32(cls, value: int) -> BigInt:
        """Create from an unsigned 32-bit integer."""
        return cls(_check_word(value, 0, U32_MAX, "u32"))

    @classmethod
    def from_i64(cls, value: int) -> BigInt:
        """Create from a signed 64-bit integer."""
        return cls(_check_word(value, I64_MIN, I64_MAX, "i64"))

    @classmethod
    def from_u64(cls, value: int) -> BigInt:
        """Create from an unsigned 64-bit integer."""
        return cls(_check_word(value, 0, U64_MAX, "u64"))

    @classmethod
    def from_signed_bytes(cls, data: bytes) -> BigInt:
        """Create from little-endian two's-complement bytes.

        An empty byte string is zero.
        """
        return cls(int.from_bytes(bytes(data), "little", signed=True))

    @classmethod
    def from_unsigned_bytes(cls, data: bytes) -> BigInt:
        """Create from little-endian unsigned bytes."""
        return cls(int.from_bytes(bytes(data), "little", signed=False))

    @classmethod
    def zero(cls) -> BigInt:
        """Create a BigInt with value 0."""
        return cls(0)

    @classmethod
    def one(cls) -> BigInt:
        """Create a BigInt with value 1."""
        return cls(1)

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"BigInt({_format_int(self._value)})"

    def __str__(self) -> str:
        return _format_int(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: BigInt | int) -> BigInt:
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return BigInt(self._value + other_val)

    def __radd__(self, other: int) -> BigInt:
        return self.__add__(other)

    def __sub__(self, other: BigInt | int) -> BigInt:
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return BigInt(self._value - other_val)

    def __rsub__(self, other: int) -> BigInt:
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return BigInt(other_val - self._value)

    def __mul__(self, other: BigInt | int) -> BigInt:
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return BigInt(self._value * other_val)

    def __rmul__(self, other: int) -> BigInt:
        return self.__mul__(other)

    def __truediv__(self, other: BigInt | int) -> BigInt:
        """Integer division truncating toward zero.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return BigInt(_div_trunc(self._value, other_val))

    def __rtruediv__(self, other: int) -> BigInt:
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return BigInt(_div_trunc(other_val, self._value))

    def __mod__(self, other: BigInt | int) -> BigInt:
        """Remainder of truncating division; the sign follows the dividend.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return BigInt(_rem_trunc(self._value, other_val))

    def __rmod__(self, other: int) -> BigInt:
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return BigInt(_rem_trunc(other_val, self._value))

    def __floordiv__(self, other: BigInt | int) -> BigInt:
        """Floor division (rounds toward negative infinity).

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {_format_int(self._value)} // 0")
        return BigInt(self._value // other_val)

    def __divmod__(self, other: BigInt | int) -> tuple[BigInt, BigInt]:
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: divmod({_format_int(self._value)}, 0)")
        quotient, remainder = divmod(self._value, other_val)
        return BigInt(quotient), BigInt(remainder)

    def __pow__(self, exponent: BigInt | int) -> BigInt:
        """Raise to a non-negative integer power.

        Raises:
            NegativeOperand: If exponent is negative
        """
        exp_val = _extract_value(exponent)
        if exp_val is None:
            return NotImplemented
        if exp_val < 0:
            raise NegativeOperand(f"Negative exponent: {exp_val}")
        return BigInt(self._value**exp_val)

    def pow(self, exponent: BigInt | int) -> BigInt:
        """Named form of `**`."""
        return self.__pow__(exponent)

    def sqrt(self) -> BigInt:
        """Floor of the square root.

        Raises:
            NegativeOperand: If the value is negative
        """
        if self._value < 0:
            raise NegativeOperand(f"Square root of negative value: {_format_int(self._value)}")
        return BigInt(math.isqrt(self._value))

    def __neg__(self) -> BigInt:
        return BigInt(-self._value)

    def __pos__(self) -> BigInt:
        return self

    def __abs__(self) -> BigInt:
        return BigInt(abs(self._value))

    def abs(self) -> BigInt:
        """Absolute value."""
        return self.__abs__()

    def div_decimal(self, other: BigDecimal) -> BigDecimal:
        """Divide by a BigDecimal, producing a BigDecimal."""
        return self.to_big_decimal() / other

    # --- Bitwise operations (two's complement) ---

    def __and__(self, other: BigInt | int) -> BigInt:
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return BigInt(self._value & other_val)

    def __rand__(self, other: int) -> BigInt:
        return self.__and__(other)

    def __or__(self, other: BigInt | int) -> BigInt:
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return BigInt(self._value | other_val)

    def __ror__(self, other: int) -> BigInt:
        return self.__or__(other)

    def __xor__(self, other: BigInt | int) -> BigInt:
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return BigInt(self._value ^ other_val)

    def __rxor__(self, other: int) -> BigInt:
        return self.__xor__(other)

    def __invert__(self) -> BigInt:
        return BigInt(~self._value)

    def __lshift__(self, bits: BigInt | int) -> BigInt:
        """Shift left, equivalent to multiplying by 2**bits.

        Raises:
            NegativeOperand: If bits is negative
        """
        count = _extract_value(bits)
        if count is None:
            return NotImplemented
        return BigInt(self._value << _check_shift(count))

    def __rshift__(self, bits: BigInt | int) -> BigInt:
        """Arithmetic shift right, equivalent to floor division by 2**bits.

        Rounds toward negative infinity, unlike `/`.

        Raises:
            NegativeOperand: If bits is negative
        """
        count = _extract_value(bits)
        if count is None:
            return NotImplemented
        return BigInt(self._value >> _check_shift(count))

    def bit_or(self, other: BigInt | int) -> BigInt:
        return self | other

    def bit_and(self, other: BigInt | int) -> BigInt:
        return self & other

    def left_shift(self, bits: BigInt | int) -> BigInt:
        return self << bits

    def right_shift(self, bits: BigInt | int) -> BigInt:
        return self >> bits

    def bit_length(self) -> int:
        """Number of bits in the magnitude, excluding sign."""
        return self._value.bit_length()

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return self._value == other_val

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: BigInt | int) -> bool:
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return self._value < other_val

    def __le__(self, other: BigInt | int) -> bool:
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return self._value <= other_val

    def __gt__(self, other: BigInt | int) -> bool:
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return self._value > other_val

    def __ge__(self, other: BigInt | int) -> bool:
        other_val = _extract_value(other)
        if other_val is None:
            return NotImplemented
        return self._value >= other_val

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._value != 0

    def is_zero(self) -> bool:
        return self._value == 0

    def is_i32(self) -> bool:
        """Check if the value fits a signed 32-bit integer."""
        return I32_MIN <= self._value <= I32_MAX

    def to_string(self) -> str:
        """Canonical base-10 literal, accepted back by from_string."""
        return _format_int(self._value)

    def to_hex(self) -> str:
        """0x-prefixed hex of the magnitude, with '-' for negative values."""
        sign = "-" if self._value < 0 else ""
        return f"{sign}0x{abs(self._value):x}"

    def to_signed_bytes(self) -> bytes:
        """Minimal little-endian two's-complement encoding.

        Zero encodes as a single zero byte.
        """
        significant = ~self._value if self._value < 0 else self._value
        length = (significant.bit_length() + 8) // 8
        return self._value.to_bytes(length, "little", signed=True)

    def to_unsigned_bytes(self) -> bytes:
        """Minimal little-endian unsigned encoding.

        Raises:
            IntegerOverflow: If the value is negative
        """
        if self._value < 0:
            raise IntegerOverflow(
                f"Negative value has no unsigned encoding: {_format_int(self._value)}"
            )
        length = max(1, (self._value.bit_length() + 7) // 8)
        return self._value.to_bytes(length, "little", signed=False)

    def to_i32(self) -> int:
        """Convert to a signed 32-bit integer.

        Raises:
            IntegerOverflow: If the value does not fit
        """
        return _check_word(self._value, I32_MIN, I32_MAX, "i32")

    def to_u32(self) -> int:
        return _check_word(self._value, 0, U32_MAX, "u32")

    def to_i64(self) -> int:
        return _check_word(self._value, I64_MIN, I64_MAX, "i64")

    def to_u64(self) -> int:
        return _check_word(self._value, 0, U64_MAX, "u64")

    def to_big_decimal(self) -> BigDecimal:
        """Exact conversion to BigDecimal (rounded if over 34 digits)."""
        from graphnum.math.big_decimal import BigDecimal

        return BigDecimal(self)


def _format_int(value: int) -> str:
    return "-" + format_digits(-value) if value < 0 else format_digits(value)


def _extract_value(x: object) -> int | None:
    """Extract integer value from BigInt or int, None for other types."""
    if isinstance(x, BigInt):
        return x._value
    if isinstance(x, int) and not isinstance(x, bool):
        return x
    return None


def _check_word(value: int, low: int, high: int, word: str) -> int:
    if isinstance(value, BigInt):
        value = value.value
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{word} requires int, got {type(value).__name__}")
    if not low <= value <= high:
        raise IntegerOverflow(f"Value {_format_int(value)} does not fit in {word}")
    return value


def _check_shift(count: int) -> int:
    if count < 0:
        raise NegativeOperand(f"Negative shift count: {count}")
    return count


def _div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // rounds toward negative infinity; for same-sign operands the
    two agree, otherwise truncate the magnitude quotient.

    Raises:
        DivisionByZero: If b is zero
    """
    if b == 0:
        raise DivisionByZero(f"Division by zero: {_format_int(a)} / 0")
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def _rem_trunc(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZero(f"Modulo by zero: {_format_int(a)} % 0")
    return a - b * _div_trunc(a, b)
