"""Pydantic field types for the numeric values.

Both types accept a decimal string or a native int (or an instance of the
value type itself) and serialize back to the canonical decimal string, so
numbers cross JSON without losing precision.
"""

from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from graphnum.math.big_decimal import BigDecimal
from graphnum.math.big_int import BigInt


def validate_big_int(value: Any) -> BigInt:
    """Validate and convert a value to BigInt.

    Args:
        value: BigInt, int or base-10 string

    Returns:
        The parsed BigInt

    Raises:
        ValueError: If value is not a valid integer literal (ParseError is a
            ValueError, which pydantic reports as a validation error)
    """
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInt(value)
    if isinstance(value, str):
        return BigInt.from_string(value)
    raise ValueError(f"BigInt must be string or int, got {type(value).__name__}")


def validate_big_decimal(value: Any) -> BigDecimal:
    """Validate and convert a value to BigDecimal (renormalized)."""
    if isinstance(value, BigDecimal):
        return value.normalized()
    if isinstance(value, BigInt) or (isinstance(value, int) and not isinstance(value, bool)):
        return BigDecimal(value)
    if isinstance(value, str):
        return BigDecimal.from_string(value)
    raise ValueError(f"BigDecimal must be string or int, got {type(value).__name__}")


class _StringNumber:
    """Core schema for a value type carried as a decimal string."""

    validator: Any = None
    pattern: str = ""
    description: str = ""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source_type: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.validator,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, _handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": cls.pattern, "description": cls.description}


class _BigIntSchema(_StringNumber):
    validator = staticmethod(validate_big_int)
    pattern = r"^[+-]?[0-9]+$"
    description = "Arbitrary-precision integer as decimal string"


class _BigDecimalSchema(_StringNumber):
    validator = staticmethod(validate_big_decimal)
    pattern = r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$"
    description = "34-digit decimal as plain decimal string"


# Arbitrary-precision integer (decimal string on the wire)
BigIntField = Annotated[BigInt, _BigIntSchema]

# Bounded-precision decimal (decimal string on the wire)
BigDecimalField = Annotated[BigDecimal, _BigDecimalSchema]
