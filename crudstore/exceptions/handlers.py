"""
Exception handlers for the application.

Error responses use an ``error`` key so clients see the same body shape for
404, 400 and 500 responses.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from crudstore.monitoring import get_request_id

logger = logging.getLogger(__name__)

INVALID_PAYLOAD_MESSAGE = "Invalid request payload"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Render HTTP errors (404 and friends) as ``{"error": ...}``.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle undecodable request bodies.

    Malformed JSON, non-object bodies and wrong field types all land here and
    are reported as 400 Bad Request.
    """
    errors = []
    for error in exc.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        errors.append(f"{field}: {error['msg']}")

    logger.warning(f"Invalid payload in {request.method} {request.url.path}: {', '.join(errors)}")
    return JSONResponse(
        status_code=400,
        content={
            "error": INVALID_PAYLOAD_MESSAGE,
            "errors": errors,
        }
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler for unhandled exceptions.
    """
    request_id = get_request_id() or '-'
    logger.error(
        f"Unhandled exception in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "method": request.method,
            "path": request.url.path,
            "exception_type": type(exc).__name__,
        }
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": "An unexpected error occurred. Please check the logs for details.",
            "path": request.url.path,
            "method": request.method,
            "request_id": request_id
        }
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
