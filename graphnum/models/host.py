"""Pydantic models for the host function API."""

from pydantic import BaseModel, Field

from graphnum.math.big_decimal import BigDecimal
from graphnum.models.types import BigDecimalField, BigIntField


class HostCall(BaseModel):
    """Arguments for one host function call."""

    args: list[str] = Field(default_factory=list, description="String-encoded arguments")


class HostResult(BaseModel):
    """Result of a host function call."""

    name: str = Field(description="Host function that was called")
    result: str = Field(description="String-encoded result")


class DecimalParts(BaseModel):
    """A raw (significand, exponent) pair, possibly outside the decimal envelope."""

    digits: BigIntField
    exp: BigIntField


class NormalizedDecimal(BaseModel):
    """A decimal after renormalization, with its stored representation."""

    value: BigDecimalField
    digits: BigIntField
    exp: BigIntField

    @classmethod
    def from_decimal(cls, value: BigDecimal) -> "NormalizedDecimal":
        normalized = value.normalized()
        return cls(value=normalized, digits=normalized.digits, exp=normalized.exp)
