"""graphnum - arbitrary-precision BigInt and decimal128-style BigDecimal."""

from graphnum.errors import (
    DivisionByZero,
    IntegerOverflow,
    NegativeOperand,
    NumericError,
    ParseError,
)
from graphnum.math import BigDecimal, BigInt

__version__ = "0.1.0"
__all__ = [
    "BigDecimal",
    "BigInt",
    "DivisionByZero",
    "IntegerOverflow",
    "NegativeOperand",
    "NumericError",
    "ParseError",
    "__version__",
]
