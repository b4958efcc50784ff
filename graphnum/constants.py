"""Numeric constants.

Machine-word bounds for the small-integer constructors and the decimal128
envelope enforced on BigDecimal.
"""

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
U32_MAX = 2**32 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1

# IEEE 754 decimal128: 34 significant digits, exponent in [-6143, 6144]
MAX_SIGNIFICANT_DIGITS = 34
MIN_EXP = -6143
MAX_EXP = 6144
