"""Pydantic models for the numeric API."""

from graphnum.models.host import DecimalParts, HostCall, HostResult, NormalizedDecimal
from graphnum.models.types import BigDecimalField, BigIntField

__all__ = [
    # Types
    "BigDecimalField",
    "BigIntField",
    # Host API models
    "DecimalParts",
    "HostCall",
    "HostResult",
    "NormalizedDecimal",
]
