"""Renormalization of decimal (significand, exponent) pairs.

A decimal value is `digits * 10**exp`. After construction and after every
arithmetic operation the pair is brought back into the configured envelope
(decimal128 by default):

1. At most `precision` significant digits. Excess low-order digits are
   dropped with round-half-up on the most significant dropped digit; a carry
   can add a digit, so the bound is re-checked until it holds.
2. `exp <= max_exp`. The significand is first padded with zeros while it has
   room (exact), so 1e6150 is stored as 1000000 * 10**6144 rather than
   clamped. Only if padding is not enough does the value saturate to the
   largest magnitude at `max_exp`.
3. `exp >= min_exp`. Low-order digits are dropped (same rounding) until
   `exp == min_exp`; the significand may round to zero.

Rounding acts on the magnitude, so negative values round half away from
zero. None of these conditions raise.
"""

from __future__ import annotations

import structlog

from graphnum.config import DEFAULT_DECIMAL_CONFIG, DecimalConfig
from graphnum.math.digits import digit_count

__all__ = ["drop_digits", "renormalize", "is_normalized"]

logger = structlog.get_logger()


def drop_digits(magnitude: int, count: int) -> int:
    """Drop `count` low-order digits of a non-negative integer, rounding half up.

    Only the most significant dropped digit decides the rounding. Dropping
    more digits than the value has leaves zero (the dropped top digit is an
    implicit leading zero).

    Args:
        magnitude: Non-negative integer
        count: Number of low-order digits to drop

    Returns:
        The rounded, shortened magnitude

    Examples:
        drop_digits(88888, 1) = 8889
        drop_digits(99999, 1) = 10000
        drop_digits(5, 1) = 1
        drop_digits(5, 2) = 0
    """
    if count <= 0:
        return magnitude
    if count > digit_count(magnitude):
        return 0
    quotient, remainder = divmod(magnitude, 10**count)
    if remainder >= 5 * 10 ** (count - 1):
        quotient += 1
    return quotient


def renormalize(
    digits: int, exp: int, config: DecimalConfig = DEFAULT_DECIMAL_CONFIG
) -> tuple[int, int]:
    """Restore the precision and exponent bounds of `digits * 10**exp`.

    Args:
        digits: Signed significand
        exp: Power-of-ten exponent
        config: Precision envelope

    Returns:
        (digits, exp) satisfying the envelope. Normalized input is returned
        unchanged.
    """
    negative = digits < 0
    magnitude = -digits if negative else digits

    ndigits = digit_count(magnitude)
    if ndigits > config.precision:
        original_digits = ndigits
        while ndigits > config.precision:
            excess = ndigits - config.precision
            magnitude = drop_digits(magnitude, excess)
            exp += excess
            ndigits = digit_count(magnitude)
        logger.debug(
            "big_decimal_rounded",
            from_digits=original_digits,
            to_digits=ndigits,
            exp=exp,
        )

    if exp > config.max_exp:
        if magnitude == 0:
            exp = config.max_exp
        else:
            pad = min(exp - config.max_exp, config.precision - ndigits)
            magnitude *= 10**pad
            exp -= pad
            if exp > config.max_exp:
                logger.debug(
                    "big_decimal_exponent_clamped",
                    exp=exp,
                    bound=config.max_exp,
                    reason="overflow",
                )
                magnitude = config.max_significand
                exp = config.max_exp

    if exp < config.min_exp:
        if magnitude != 0:
            logger.debug(
                "big_decimal_exponent_clamped",
                exp=exp,
                bound=config.min_exp,
                reason="underflow",
            )
        magnitude = drop_digits(magnitude, config.min_exp - exp)
        exp = config.min_exp

    return (-magnitude if negative else magnitude), exp


def is_normalized(digits: int, exp: int, config: DecimalConfig = DEFAULT_DECIMAL_CONFIG) -> bool:
    """Check whether the pair already satisfies the envelope."""
    return (
        config.min_exp <= exp <= config.max_exp
        and digit_count(digits) <= config.precision
    )
