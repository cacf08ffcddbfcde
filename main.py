"""FastAPI application for the mobile formatter service.

Exports ``app`` for use with ``uvicorn main:app``.
"""

import json
import logging
import traceback
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Load .env from the service directory so MF_* settings are set
load_dotenv(Path(__file__).resolve().parent / ".env")

from models.request import FormatRequest
from models.response import FormatResponse
from transform.config import load_settings
from transform.errors import InvalidConfiguration
from transform.formatter import formatter_for


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
        for key in (
            "title",
            "formatter",
            "top_heading",
            "removed",
            "images_replaced",
            "sections",
            "main_page_fallback",
        ):
            val = getattr(record, key, None)
            if val is not None:
                log_data[key] = val
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


_handler = logging.StreamHandler()
_handler.setFormatter(StructuredFormatter())

logger = logging.getLogger("formatter")
logger.addHandler(_handler)
logger.setLevel(logging.INFO)
# Prevent propagation to root logger to avoid duplicate output
logger.propagate = False


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

settings = load_settings()

app = FastAPI(title="Mobile Formatter")


@app.exception_handler(InvalidConfiguration)
async def invalid_configuration_handler(
    request: Request, exc: InvalidConfiguration
) -> JSONResponse:
    """Reject bad heading tags or selectors that slipped past validation."""
    logger.warning("invalid configuration: %s", exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def catch_all_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and answer with a 500."""
    logger.error(
        "Unhandled exception: %s: %s\n%s",
        type(exc).__name__,
        exc,
        traceback.format_exc(),
    )
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
async def health() -> dict:
    """Health check."""
    return {"status": "healthy"}


@app.post("/format", response_model=FormatResponse)
def format_page(request: FormatRequest) -> FormatResponse:
    """Format a rendered page for mobile devices.

    Picks the main page or the generic pipeline from the page title, applies
    the request's options and extra removal selectors, and returns the
    resulting HTML.
    """
    logger.info("format request", extra={"title": request.title})

    formatter = formatter_for(
        request.html,
        request.title,
        request.special_case_main_page,
        settings=settings,
        options=request.options,
    )
    formatter.remove(request.remove)
    html = formatter.get_text()

    return FormatResponse(
        html=html,
        formatter=formatter.kind,
        main_page_fallback=formatter.main_page_fallback,
    )
