"""FastAPI application exposing the numeric host functions."""

import logging
import os

import structlog
import uvicorn
from fastapi import FastAPI

from graphnum import __version__
from graphnum.api.endpoints import router

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("GRAPHNUM_HOST", "0.0.0.0")
PORT = int(os.environ.get("GRAPHNUM_PORT", "8000"))
DEBUG = os.environ.get("GRAPHNUM_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="graphnum",
    description="BigInt and BigDecimal host functions",
    version=__version__,
)

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


def configure_logging(debug: bool = DEBUG) -> None:
    """Configure structlog; numeric rounding events are only shown in debug mode."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.INFO
        ),
    )


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - GRAPHNUM_HOST: Host to bind to (default: 0.0.0.0)
    - GRAPHNUM_PORT: Port to bind to (default: 8000)
    - GRAPHNUM_DEBUG: Enable debug logging and reload mode (default: false)
    """
    configure_logging()
    uvicorn.run(
        "graphnum.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
