"""Global error handlers for the FastAPI application."""

from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from metapixel.config import settings

logger = logging.getLogger(__name__)


def _field_name(loc: tuple) -> str:
    names = [part for part in loc if isinstance(part, str) and part not in ("body", "query")]
    return names[-1] if names else "request"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Rejected input becomes a 400 listing each bad field."""
    errors = [
        {
            "field": _field_name(tuple(err.get("loc", ()))),
            "message": str(err.get("msg", "")).removeprefix("Value error, "),
        }
        for err in exc.errors()
    ]
    logger.info("Validation error on %s: %s", request.url.path, errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unhandled errors become a 500; details hidden in production."""
    logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc)
    message = "Something went wrong" if settings.is_production else str(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error", "message": message},
    )
