"""Host function table for numeric operations.

Mapping code reaches BigInt and BigDecimal through named host functions
("bigInt.plus", "bigDecimal.dividedBy", ...). Arguments and results cross
the boundary as canonical decimal strings, so the table can be driven from
any transport that carries text.

Usage pattern:
    exports = get_default_exports()
    exports.call("bigDecimal.dividedBy", ["1", "10"])  # "0.1"
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

import structlog

from graphnum.errors import IntegerOverflow, UnknownHostFunction
from graphnum.math.big_decimal import BigDecimal
from graphnum.math.big_int import BigInt

logger = structlog.get_logger()

# Shift amounts and pow exponents cross the boundary as u8
MAX_U8 = 255


@dataclass(frozen=True)
class HostFunction:
    """A registered host function.

    Attributes:
        name: Dotted host name, e.g. "bigInt.plus"
        arity: Number of string arguments
        handler: Callable taking `arity` strings and returning a string
    """

    name: str
    arity: int
    handler: Callable[..., str]


class HostExports:
    """Registry of host functions keyed by name."""

    def __init__(self, *, register_defaults: bool = True) -> None:
        self._functions: dict[str, HostFunction] = {}
        if register_defaults:
            _register_numeric_functions(self)

    def register(self, name: str, arity: int, handler: Callable[..., str]) -> None:
        """Register (or replace) a host function."""
        self._functions[name] = HostFunction(name=name, arity=arity, handler=handler)

    def names(self) -> list[str]:
        """Sorted names of all registered functions."""
        return sorted(self._functions)

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def call(self, name: str, args: Sequence[str]) -> str:
        """Invoke a host function.

        Args:
            name: Registered host function name
            args: String-encoded arguments

        Returns:
            String-encoded result

        Raises:
            UnknownHostFunction: If name is not registered
            TypeError: If the argument count does not match the arity
            NumericError: Propagated from the numeric operation
        """
        function = self._functions.get(name)
        if function is None:
            raise UnknownHostFunction(f"Unknown host function: {name}")
        if len(args) != function.arity:
            raise TypeError(f"{name} expects {function.arity} arguments, got {len(args)}")
        logger.debug("host_call", name=name, arg_count=len(args))
        return function.handler(*args)


def _u8_operand(s: str, what: str) -> int:
    amount = BigInt.from_string(s)
    if not 0 <= amount.value <= MAX_U8:
        raise IntegerOverflow(f"{what} {amount} does not fit in u8")
    return amount.value


def _big_int_binary(op: Callable[[BigInt, BigInt], BigInt]) -> Callable[[str, str], str]:
    def handler(a: str, b: str) -> str:
        return op(BigInt.from_string(a), BigInt.from_string(b)).to_string()

    return handler


def _big_decimal_binary(
    op: Callable[[BigDecimal, BigDecimal], BigDecimal],
) -> Callable[[str, str], str]:
    def handler(a: str, b: str) -> str:
        return op(BigDecimal.from_string(a), BigDecimal.from_string(b)).to_string()

    return handler


def _register_numeric_functions(exports: HostExports) -> None:
    exports.register("bigInt.fromString", 1, lambda s: BigInt.from_string(s).to_string())
    exports.register("bigInt.plus", 2, _big_int_binary(lambda a, b: a + b))
    exports.register("bigInt.minus", 2, _big_int_binary(lambda a, b: a - b))
    exports.register("bigInt.times", 2, _big_int_binary(lambda a, b: a * b))
    exports.register("bigInt.dividedBy", 2, _big_int_binary(lambda a, b: a / b))
    exports.register("bigInt.mod", 2, _big_int_binary(lambda a, b: a % b))
    exports.register(
        "bigInt.pow",
        2,
        lambda a, n: BigInt.from_string(a).pow(_u8_operand(n, "Exponent")).to_string(),
    )
    exports.register("bigInt.bitOr", 2, _big_int_binary(lambda a, b: a | b))
    exports.register("bigInt.bitAnd", 2, _big_int_binary(lambda a, b: a & b))
    exports.register(
        "bigInt.leftShift",
        2,
        lambda a, n: (BigInt.from_string(a) << _u8_operand(n, "Shift amount")).to_string(),
    )
    exports.register(
        "bigInt.rightShift",
        2,
        lambda a, n: (BigInt.from_string(a) >> _u8_operand(n, "Shift amount")).to_string(),
    )
    exports.register(
        "bigInt.dividedByDecimal",
        2,
        lambda a, d: BigInt.from_string(a).div_decimal(BigDecimal.from_string(d)).to_string(),
    )
    exports.register("bigInt.toHex", 1, lambda a: BigInt.from_string(a).to_hex())

    exports.register(
        "bigDecimal.fromString", 1, lambda s: BigDecimal.from_string(s).to_string()
    )
    exports.register("bigDecimal.toString", 1, lambda s: BigDecimal.from_string(s).to_string())
    exports.register("bigDecimal.plus", 2, _big_decimal_binary(lambda a, b: a + b))
    exports.register("bigDecimal.minus", 2, _big_decimal_binary(lambda a, b: a - b))
    exports.register("bigDecimal.times", 2, _big_decimal_binary(lambda a, b: a * b))
    exports.register("bigDecimal.dividedBy", 2, _big_decimal_binary(lambda a, b: a / b))
    exports.register(
        "bigDecimal.equals",
        2,
        lambda a, b: "true" if BigDecimal.from_string(a) == BigDecimal.from_string(b) else "false",
    )


_default_exports: HostExports | None = None


def get_default_exports() -> HostExports:
    """Shared HostExports instance with the numeric functions registered."""
    global _default_exports
    if _default_exports is None:
        _default_exports = HostExports()
    return _default_exports
