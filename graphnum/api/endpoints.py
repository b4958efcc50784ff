"""API endpoints for the numeric host functions."""

import structlog
from fastapi import APIRouter, Depends, HTTPException

from graphnum.errors import DivisionByZero, NumericError, ParseError, UnknownHostFunction
from graphnum.host.exports import HostExports, get_default_exports
from graphnum.math.big_decimal import BigDecimal
from graphnum.models.host import DecimalParts, HostCall, HostResult, NormalizedDecimal

logger = structlog.get_logger()

router = APIRouter()


def get_exports() -> HostExports:
    """Dependency provider for the host function table.

    Override this in tests to inject a custom table:
        app.dependency_overrides[get_exports] = lambda: exports
    """
    return get_default_exports()


@router.get("/host")
async def list_host_functions(exports: HostExports = Depends(get_exports)) -> dict[str, list[str]]:
    """List registered host function names."""
    return {"functions": exports.names()}


@router.post("/host/{name}")
async def call_host_function(
    name: str,
    call: HostCall,
    exports: HostExports = Depends(get_exports),
) -> HostResult:
    """Call a host function with string-encoded arguments.

    Error Handling:
        - Unknown function: 404
        - Malformed literal or wrong argument count: 422
        - Division by zero and other numeric errors: 400
    """
    logger.info("host_call_received", name=name, arg_count=len(call.args))

    try:
        result = exports.call(name, call.args)
    except UnknownHostFunction as err:
        logger.warning("unknown_host_function", name=name)
        raise HTTPException(status_code=404, detail=str(err)) from err
    except (ParseError, TypeError) as err:
        logger.warning("host_call_invalid_arguments", name=name, error=str(err))
        raise HTTPException(status_code=422, detail=str(err)) from err
    except DivisionByZero as err:
        logger.warning("host_call_division_by_zero", name=name)
        raise HTTPException(status_code=400, detail=str(err)) from err
    except NumericError as err:
        logger.warning("host_call_numeric_error", name=name, error=str(err))
        raise HTTPException(status_code=400, detail=str(err)) from err

    return HostResult(name=name, result=result)


@router.post("/decimal/normalize")
async def normalize_decimal(parts: DecimalParts) -> NormalizedDecimal:
    """Renormalize a raw (digits, exp) pair into the decimal envelope."""
    return NormalizedDecimal.from_decimal(BigDecimal(parts.digits, parts.exp))
