"""Decimal precision configuration."""

from dataclasses import dataclass

from graphnum.constants import MAX_EXP, MAX_SIGNIFICANT_DIGITS, MIN_EXP


@dataclass(frozen=True)
class DecimalConfig:
    """Precision envelope applied when renormalizing a BigDecimal.

    Attributes:
        precision: Maximum number of significant decimal digits (default: 34)
        min_exp: Smallest allowed exponent (default: -6143)
        max_exp: Largest allowed exponent (default: 6144)
    """

    precision: int = MAX_SIGNIFICANT_DIGITS
    min_exp: int = MIN_EXP
    max_exp: int = MAX_EXP

    def __post_init__(self) -> None:
        if self.precision < 1:
            raise ValueError(f"precision must be at least 1, got {self.precision}")
        if self.min_exp > self.max_exp:
            raise ValueError(f"min_exp {self.min_exp} exceeds max_exp {self.max_exp}")

    @property
    def max_significand(self) -> int:
        """Largest significand magnitude representable at this precision."""
        return 10**self.precision - 1


# Default configuration instance (decimal128)
DEFAULT_DECIMAL_CONFIG = DecimalConfig()
