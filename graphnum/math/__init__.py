"""Arbitrary-precision numeric types.

This package provides the numeric primitives used by mapping code:
- BigInt: arbitrary-precision signed integer with two's-complement bitwise ops
- BigDecimal: 34-digit decimal with decimal128 exponent bounds
"""

from graphnum.math.big_decimal import BigDecimal
from graphnum.math.big_int import BigInt

__all__ = ["BigDecimal", "BigInt"]
