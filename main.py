"""FastAPI application for the CSS selector builder.

Exports ``app`` for use with ``uvicorn main:app``.
"""

import json
import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Load .env from the service directory so SELECTOR_LOG_LEVEL is set
load_dotenv(Path(__file__).resolve().parent / ".env")

from builder.assemble import build_selector
from models.errors import SelectorError
from models.request import BuildRequest
from models.response import BuildResponse, ErrorResponse


# ---------------------------------------------------------------------------
# Structured JSON logging
# ---------------------------------------------------------------------------

class StructuredFormatter(logging.Formatter):
    """JSON-lines formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Include optional extra fields when present
        for key in ("selector_type", "selector", "error"):
            val = getattr(record, key, None)
            if val is not None:
                log_data[key] = val
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def resolve_log_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


_handler = logging.StreamHandler()
_handler.setFormatter(StructuredFormatter())

logger = logging.getLogger("selector")
logger.addHandler(_handler)
logger.setLevel(resolve_log_level(os.getenv("SELECTOR_LOG_LEVEL", "INFO")))
# Prevent propagation to root logger to avoid duplicate output
logger.propagate = False


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(title="CSS Selector Builder")


@app.exception_handler(SelectorError)
async def selector_error_handler(request: Request, exc: SelectorError) -> JSONResponse:
    """Report chain-rule violations as a 400 with the error class name."""
    logger.info(
        "selector rejected",
        extra={"error": type(exc).__name__},
    )
    body = ErrorResponse(error=type(exc).__name__, detail=str(exc))
    return JSONResponse(status_code=400, content=body.model_dump())


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
async def health() -> dict:
    """Health check."""
    return {"status": "healthy"}


@app.post("/selectors", response_model=BuildResponse)
async def selectors(request: BuildRequest) -> BuildResponse:
    """Build a selector string from a simple or compound description."""
    logger.info(
        "build request",
        extra={"selector_type": request.selector.type},
    )

    selector = build_selector(request.selector).stringify()

    logger.info(
        "build response",
        extra={"selector": selector},
    )

    return BuildResponse(selector=selector)
