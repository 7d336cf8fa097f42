"""
Error Handling for FoodShare

Centralized error handling:
- Structured error responses
- Logging of errors
- Exception translation
"""

import traceback
from datetime import datetime, timezone
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from foodshare.exceptions import FoodShareException

# Routes whose error bodies also carry "success": false
SUCCESS_FLAG_PATHS = {"/pay"}


def create_error_response(
    error: str,
    code: str,
    status_code: int,
    detail: str = None,
    extra: Optional[dict] = None,
) -> JSONResponse:
    """Create standardized error response."""
    content = dict(extra or {})
    content.update({
        "error": error,
        "code": code,
        "detail": detail,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })
    return JSONResponse(status_code=status_code, content=content)


def setup_exception_handlers(app):
    """Register exception handlers with FastAPI app."""

    @app.exception_handler(FoodShareException)
    async def foodshare_exception_handler(request: Request, exc: FoodShareException):
        logger.warning(f"FoodShare error: {exc.code} - {exc.message} ({request.url.path})")
        return create_error_response(
            error=exc.message,
            code=exc.code,
            status_code=exc.status_code,
            detail=exc.detail,
            extra=exc.extra_content(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error: {exc.errors()}")
        extra = {"success": False} if request.url.path in SUCCESS_FLAG_PATHS else None
        return create_error_response(
            error="Invalid request body",
            code="VALIDATION_ERROR",
            status_code=400,
            detail=str(exc.errors()),
            extra=extra,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {str(exc)}\n"
            f"{traceback.format_exc()}"
        )
        return create_error_response(
            error="Internal Server Error",
            code="INTERNAL_ERROR",
            status_code=500,
            detail="An unexpected error occurred",
            extra={"success": False} if request.url.path in SUCCESS_FLAG_PATHS else None,
        )
