"""Bounded-precision decimal: `digits * 10**exp`.

BigDecimal follows the IEEE 754 decimal128 envelope: at most 34 significant
digits and an exponent in [-6143, 6144]. Every constructor and arithmetic
operation renormalizes (see graphnum.math.rounding), so excess precision is
rounded half up and out-of-range exponents are clamped instead of raising.

Equality and ordering compare mathematical values, so differently scaled
representations of one number (1.50 and 1.5, or 10 * 10**1 and 1 * 10**2)
compare equal. The stored representation keeps its trailing zeros.

`with_exp` is the single escape hatch from normalization: it returns a copy
with a caller-chosen exponent and skips renormalization. Any later
operation renormalizes its operands first.

Rounding makes `+` and `*` associative only up to the final rounding:
`(a + b) + c` may differ from `a + (b + c)` in the last digit when
intermediate results exceed 34 digits.
"""

from __future__ import annotations

import re
from typing import ClassVar

from graphnum.config import DEFAULT_DECIMAL_CONFIG, DecimalConfig
from graphnum.errors import DivisionByZero, ParseError
from graphnum.math.big_int import BigInt
from graphnum.math.digits import digit_count, format_digits, parse_digits
from graphnum.math.rounding import is_normalized, renormalize

__all__ = ["BigDecimal"]

# sign, integer digits, fraction digits, exponent
_DECIMAL_LITERAL = re.compile(r"([+-])?([0-9]*)(?:\.([0-9]*))?(?:[eE]([+-])?([0-9]+))?")


class BigDecimal:
    """Immutable decimal value with 34-digit precision.

    Attributes:
        digits: Signed significand as BigInt (read-only)
        exp: Power-of-ten exponent as BigInt (read-only)
    """

    CONFIG: ClassVar[DecimalConfig] = DEFAULT_DECIMAL_CONFIG

    __slots__ = ("_digits", "_exp")
    _digits: int
    _exp: int

    def __init__(self, value: BigInt | int | BigDecimal = 0, exp: BigInt | int = 0) -> None:
        """Create `value * 10**exp`, renormalized.

        A BigInt with more than 34 digits is rounded on construction.

        Raises:
            TypeError: If value or exp has an unsupported type
        """
        if isinstance(value, BigDecimal):
            digits, base_exp = value._digits, value._exp
        else:
            digits, base_exp = _int_operand(value, "value"), 0
        self._digits, self._exp = renormalize(
            digits, base_exp + _int_operand(exp, "exp"), self.CONFIG
        )

    @classmethod
    def _from_parts(cls, digits: int, exp: int, *, normalize: bool = True) -> BigDecimal:
        instance = object.__new__(cls)
        if normalize:
            digits, exp = renormalize(digits, exp, cls.CONFIG)
        instance._digits = digits
        instance._exp = exp
        return instance

    # --- Construction ---

    @classmethod
    def from_string(cls, s: str) -> BigDecimal:
        """Parse a decimal literal.

        Accepts an optional sign, integer and/or fraction digits and an
        optional exponent suffix: "1", "-0.5", ".5", "5.", "1.25e-3".

        Raises:
            ParseError: On empty input, a stray sign or point, or any
                invalid character
        """
        if not isinstance(s, str):
            raise ParseError(f"BigDecimal literal must be a string, got {type(s).__name__}")
        match = _DECIMAL_LITERAL.fullmatch(s)
        if match is None:
            raise ParseError(f"Invalid BigDecimal literal: {s!r}")
        sign, int_part, frac_part, exp_sign, exp_part = match.groups()
        frac_part = frac_part or ""
        if not int_part and not frac_part:
            raise ParseError(f"Invalid BigDecimal literal: {s!r}")

        digits = parse_digits(int_part + frac_part)
        if sign == "-":
            digits = -digits
        exp = parse_digits(exp_part) if exp_part else 0
        if exp_sign == "-":
            exp = -exp
        return cls._from_parts(digits, exp - len(frac_part))

    @classmethod
    def zero(cls) -> BigDecimal:
        return cls._from_parts(0, 0)

    @classmethod
    def one(cls) -> BigDecimal:
        return cls._from_parts(1, 0)

    @property
    def digits(self) -> BigInt:
        """The significand as stored."""
        return BigInt(self._digits)

    @property
    def exp(self) -> BigInt:
        """The exponent as stored."""
        return BigInt(self._exp)

    def with_exp(self, exp: BigInt | int) -> BigDecimal:
        """Return a copy with the exponent replaced, without renormalizing.

        The result may sit outside the exponent range; the next operation
        on it renormalizes.

        Example:
            small = BigDecimal.from_string("0.99999999999999999999999999999999968")
            small = small.with_exp(small.exp - 6109) * BigDecimal.one()
        """
        return self._from_parts(self._digits, _int_operand(exp, "exp"), normalize=False)

    def normalized(self) -> BigDecimal:
        """Renormalized copy; normalized values come back unchanged."""
        return self._from_parts(self._digits, self._exp)

    def _parts(self) -> tuple[int, int]:
        if is_normalized(self._digits, self._exp, self.CONFIG):
            return self._digits, self._exp
        return renormalize(self._digits, self._exp, self.CONFIG)

    def __repr__(self) -> str:
        return f"BigDecimal(digits={self._digits}, exp={self._exp})"

    def __str__(self) -> str:
        return self.to_string()

    def __hash__(self) -> int:
        digits, exp = self._parts()
        if digits == 0:
            return hash(0)
        while digits % 10 == 0:
            digits //= 10
            exp += 1
        if exp >= 0:
            return hash(digits * 10**exp)
        return hash((digits, exp))

    # --- Arithmetic operations ---

    def __add__(self, other: BigDecimal | BigInt | int) -> BigDecimal:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return self._add_parts(self._parts(), other_dec._parts())

    def __radd__(self, other: BigInt | int) -> BigDecimal:
        return self.__add__(other)

    def __sub__(self, other: BigDecimal | BigInt | int) -> BigDecimal:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        digits, exp = other_dec._parts()
        return self._add_parts(self._parts(), (-digits, exp))

    def __rsub__(self, other: BigInt | int) -> BigDecimal:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return other_dec.__sub__(self)

    def __mul__(self, other: BigDecimal | BigInt | int) -> BigDecimal:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        da, ea = self._parts()
        db, eb = other_dec._parts()
        return self._from_parts(da * db, ea + eb)

    def __rmul__(self, other: BigInt | int) -> BigDecimal:
        return self.__mul__(other)

    def __truediv__(self, other: BigDecimal | BigInt | int) -> BigDecimal:
        """Divide, rounding the quotient to 34 significant digits.

        The dividend is extended by 10**k so that the truncated quotient
        carries at least one digit beyond the precision; renormalization
        then rounds half up on that digit. Exact quotients drop the padding
        zeros again, back toward the exponent `exp_a - exp_b`.

        Raises:
            DivisionByZero: If other is zero
        """
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        da, ea = self._parts()
        db, eb = other_dec._parts()
        if db == 0:
            raise DivisionByZero(f"Division by zero: {self} / 0")
        if da == 0:
            return self._from_parts(0, ea - eb)

        negative = (da < 0) != (db < 0)
        ma, mb = abs(da), abs(db)
        k = max(0, self.CONFIG.precision + 1 + digit_count(mb) - digit_count(ma))
        quotient, remainder = divmod(ma * 10**k, mb)
        if remainder == 0:
            while k > 0 and quotient % 10 == 0:
                quotient //= 10
                k -= 1
        if negative:
            quotient = -quotient
        return self._from_parts(quotient, ea - eb - k)

    def __rtruediv__(self, other: BigInt | int) -> BigDecimal:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return other_dec.__truediv__(self)

    def __neg__(self) -> BigDecimal:
        digits, exp = self._parts()
        return self._from_parts(-digits, exp)

    def __pos__(self) -> BigDecimal:
        return self.normalized()

    def __abs__(self) -> BigDecimal:
        digits, exp = self._parts()
        return self._from_parts(abs(digits), exp)

    def plus(self, other: BigDecimal | BigInt | int) -> BigDecimal:
        return self + other

    def minus(self, other: BigDecimal | BigInt | int) -> BigDecimal:
        return self - other

    def times(self, other: BigDecimal | BigInt | int) -> BigDecimal:
        return self * other

    def divided_by(self, other: BigDecimal | BigInt | int) -> BigDecimal:
        return self / other

    def truncate(self, decimals: int) -> BigDecimal:
        """Drop fraction digits beyond `decimals`, rounding toward zero."""
        digits, exp = self._parts()
        if exp >= -decimals:
            return self._from_parts(digits, exp)
        drop = -decimals - exp
        magnitude = abs(digits)
        magnitude = 0 if drop > digit_count(magnitude) else magnitude // 10**drop
        return self._from_parts(-magnitude if digits < 0 else magnitude, -decimals)

    @classmethod
    def _add_parts(cls, a: tuple[int, int], b: tuple[int, int]) -> BigDecimal:
        (da, ea), (db, eb) = a, b
        if ea > eb:
            da *= 10 ** (ea - eb)
            ea = eb
        elif eb > ea:
            db *= 10 ** (eb - ea)
        return cls._from_parts(da + db, ea)

    # --- Comparison operations ---

    def _compare(self, other: BigDecimal) -> int:
        da, ea = self._parts()
        db, eb = other._parts()
        if ea > eb:
            da *= 10 ** (ea - eb)
        elif eb > ea:
            db *= 10 ** (eb - ea)
        return (da > db) - (da < db)

    def __eq__(self, other: object) -> bool:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return self._compare(other_dec) == 0

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: BigDecimal | BigInt | int) -> bool:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return self._compare(other_dec) < 0

    def __le__(self, other: BigDecimal | BigInt | int) -> bool:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return self._compare(other_dec) <= 0

    def __gt__(self, other: BigDecimal | BigInt | int) -> bool:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return self._compare(other_dec) > 0

    def __ge__(self, other: BigDecimal | BigInt | int) -> bool:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return self._compare(other_dec) >= 0

    # --- Conversion ---

    def __bool__(self) -> bool:
        return self._parts()[0] != 0

    def is_zero(self) -> bool:
        return self._parts()[0] == 0

    def to_string(self) -> str:
        """Plain-notation literal (no exponent suffix).

        The stored scale is kept: digits=150, exp=-2 prints "1.50". Zero
        prints "0" at any exponent.
        """
        digits, exp = self._parts()
        if digits == 0:
            return "0"
        sign = "-" if digits < 0 else ""
        body = format_digits(abs(digits))
        if exp >= 0:
            return sign + body + "0" * exp
        point = len(body) + exp
        if point > 0:
            return f"{sign}{body[:point]}.{body[point:]}"
        return f"{sign}0.{'0' * -point}{body}"


def _int_operand(value: object, name: str) -> int:
    if isinstance(value, BigInt):
        return value.value
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise TypeError(f"BigDecimal {name} requires int or BigInt, got {type(value).__name__}")


def _coerce(x: object) -> BigDecimal | None:
    """Promote BigInt and int operands; None for unsupported types."""
    if isinstance(x, BigDecimal):
        return x
    if isinstance(x, BigInt) or (isinstance(x, int) and not isinstance(x, bool)):
        return BigDecimal(x)
    return None
