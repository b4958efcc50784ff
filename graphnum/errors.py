"""Numeric error classes.

Hard errors abort the operation and surface to the caller. Rounding to the
significant-digit limit and exponent clamping are part of the decimal
contract and never raise.
"""


class NumericError(ArithmeticError):
    """Base error for BigInt and BigDecimal operations."""

    pass


class ParseError(NumericError, ValueError):
    """Malformed numeric literal (empty, stray sign, invalid characters)."""

    pass


class DivisionByZero(NumericError, ZeroDivisionError):
    """Integer or decimal division or modulo by zero."""

    pass


class IntegerOverflow(NumericError, OverflowError):
    """Value does not fit the requested fixed-width machine word."""

    pass


class NegativeOperand(NumericError, ValueError):
    """Negative shift count, negative power or square root of a negative."""

    pass


class UnknownHostFunction(NumericError, LookupError):
    """Host function name is not registered."""

    pass
