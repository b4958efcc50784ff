"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Rounding and bitwise literals used across tests
- factories: Short constructors for BigInt and BigDecimal
"""

from tests.helpers.constants import (
    BIG_INT_16,
    EIGHTS_33_NINE_ZERO,
    EIGHTS_35,
    MAX_EXP,
    MAX_SIGNIFICAND,
    MIN_EXP,
    NINES_33_SEVEN,
    NINES_35,
    ONE_THEN_35_ZEROS,
    PRECISION,
    SMALL_35,
)
from tests.helpers.factories import D, I, parts

__all__ = [
    # Constants
    "BIG_INT_16",
    "EIGHTS_33_NINE_ZERO",
    "EIGHTS_35",
    "MAX_EXP",
    "MAX_SIGNIFICAND",
    "MIN_EXP",
    "NINES_33_SEVEN",
    "NINES_35",
    "ONE_THEN_35_ZEROS",
    "PRECISION",
    "SMALL_35",
    # Factories
    "D",
    "I",
    "parts",
]
