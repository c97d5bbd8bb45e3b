"""
Application middleware
"""
import time
import uuid
from datetime import datetime, timezone
from typing import Callable
from fastapi import Request, Response
from fastapi.responses import JSONResponse
import structlog

from app.core.exceptions import (
    EventRegistryException,
    NotFoundError,
    DatabaseError
)

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


async def logging_middleware(request: Request, call_next: Callable) -> Response:
    """
    Bind a request id to every log line of the request and time the response

    An incoming X-Request-ID is reused so ids match across services.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
    )
    started = time.perf_counter()
    logger.debug("Request received", client_ip=request.client.host if request.client else None)

    try:
        response = await call_next(request)
        elapsed = time.perf_counter() - started
        logger.info("Request handled", status_code=response.status_code, process_time=round(elapsed, 4))
    finally:
        structlog.contextvars.clear_contextvars()

    response.headers[REQUEST_ID_HEADER] = request_id
    response.headers["X-Process-Time"] = f"{elapsed:.4f}"
    return response


async def exception_handler(request: Request, exc: EventRegistryException) -> JSONResponse:
    """Map application exceptions to HTTP responses"""
    status_code = 400
    if isinstance(exc, NotFoundError):
        status_code = 404
    elif isinstance(exc, DatabaseError):
        status_code = 500

    log = logger.error if status_code >= 500 else logger.warning
    log(
        "Application exception",
        exception=exc.__class__.__name__,
        message=exc.message,
        details=exc.details,
        url=str(request.url)
    )

    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.__class__.__name__,
            "message": exc.message,
            "details": exc.details,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "path": str(request.url.path)
        }
    )


async def security_headers_middleware(request: Request, call_next: Callable) -> Response:
    """Add security headers a handler has not already set"""
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response
