"""Decimal digit helpers for arbitrarily large integers.

Python caps int <-> str conversion at a few thousand digits
(sys.get_int_max_str_digits). Values scaled across the decimal128 exponent
range exceed that, so conversions here split the work into chunks below
the cap instead of relying on str()/int() directly.
"""

from __future__ import annotations

__all__ = ["digit_count", "format_digits", "parse_digits"]

# Chunk size for conversions, well below the interpreter's default cap (4300)
_CHUNK_DIGITS = 1000
_CHUNK_LIMIT = 10**_CHUNK_DIGITS

# log10(2), for estimating digit counts from bit lengths
_LOG10_2 = 0.30102999566398120


def digit_count(n: int) -> int:
    """Number of decimal digits in |n|; zero has one digit.

    Estimates from the bit length, then corrects the estimate exactly.
    """
    n = abs(n)
    if n < 10:
        return 1
    guess = int((n.bit_length() - 1) * _LOG10_2) + 1
    while guess > 1 and n < 10 ** (guess - 1):
        guess -= 1
    while n >= 10**guess:
        guess += 1
    return guess


def parse_digits(s: str) -> int:
    """Convert a string of ASCII decimal digits to int, with no size cap.

    The caller validates that s is non-empty and all digits.
    """
    if len(s) <= _CHUNK_DIGITS:
        return int(s)
    low_len = len(s) // 2
    high = parse_digits(s[:-low_len])
    low = parse_digits(s[-low_len:])
    return high * 10**low_len + low


def format_digits(n: int) -> str:
    """Decimal digits of a non-negative int, with no size cap."""
    if n < _CHUNK_LIMIT:
        return str(n)
    low_len = digit_count(n) // 2
    high, low = divmod(n, 10**low_len)
    return format_digits(high) + format_digits(low).zfill(low_len)
