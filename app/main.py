from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
import logging
import math

from app.api.v1.router import router as api_v1_router
from app.core.exceptions import (
    InvalidAgentLevelError,
    InvalidProjectionInputError,
    InvalidProspectCountError,
    InvalidProspectOriginError,
)
from app.core.config import settings as app_settings
from app.core.rate_limit import limiter

# Configure logging
logging.basicConfig(level=app_settings.effective_log_level)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="RIALTOR Funnel Service",
    description="Conversion rates, sales-funnel and commission projections for Argentine real-estate agents",
    version="0.1.0",
)

# Attach rate limiter state so slowapi middleware can find it
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS middleware – restricted to configured origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        o.strip() for o in app_settings.CORS_ORIGINS.split(",") if o.strip()
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_v1_router)


@app.exception_handler(InvalidAgentLevelError)
async def invalid_agent_level_handler(request: Request, exc: InvalidAgentLevelError):
    logger.warning("Invalid agent level: %s", exc.detail)
    return JSONResponse(
        status_code=422,
        content={"detail": exc.detail, "type": "invalid_agent_level"},
    )


@app.exception_handler(InvalidProspectOriginError)
async def invalid_prospect_origin_handler(
    request: Request, exc: InvalidProspectOriginError
):
    logger.warning("Invalid prospect origin: %s", exc.detail)
    return JSONResponse(
        status_code=422,
        content={"detail": exc.detail, "type": "invalid_prospect_origin"},
    )


@app.exception_handler(InvalidProspectCountError)
async def invalid_prospect_count_handler(
    request: Request, exc: InvalidProspectCountError
):
    logger.warning("Invalid prospect count: %s", exc.detail)
    return JSONResponse(
        status_code=422,
        content={"detail": exc.detail, "type": "invalid_prospect_count"},
    )


@app.exception_handler(InvalidProjectionInputError)
async def invalid_projection_input_handler(
    request: Request, exc: InvalidProjectionInputError
):
    logger.warning("Invalid projection input: %s", exc.detail)
    return JSONResponse(
        status_code=422,
        content={"detail": exc.detail, "type": "invalid_projection_input"},
    )


def _finite_json(value):
    """Replace NaN and infinities, which strict JSON cannot carry, with strings."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {k: _finite_json(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_finite_json(v) for v in value]
    return value


def _jsonable_errors(exc: RequestValidationError) -> list:
    """Validation errors made safe for a strict JSON response.

    ``ctx`` may hold exception objects and ``input`` echoes the raw
    request value, which can be a NaN or infinity literal.
    """
    errors = []
    for error in exc.errors():
        error = dict(error)
        if "ctx" in error:
            error["ctx"] = {k: str(v) for k, v in error["ctx"].items()}
        if "input" in error:
            error["input"] = _finite_json(jsonable_encoder(error["input"]))
        errors.append(error)
    return errors


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Request validation error: %s", exc.errors())
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Request validation failed",
            "errors": _jsonable_errors(exc),
            "type": "validation_error",
        },
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Catch-all handler for unexpected/unhandled exceptions.

    Returns a generic 500 response so that raw stack traces are never
    leaked to the client.
    """
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected internal error occurred. Please try again later.",
            "type": "internal_server_error",
        },
    )
