"""
Error taxonomy and JSON exception handlers for the Restaurant Order API
"""

import uuid
import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

class OrderServiceError(Exception):
    """Base class for errors surfaced to API clients"""
    status_code = 500

    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail
        super().__init__(self.message)

class ValidationError(OrderServiceError):
    """Missing or malformed required input"""
    status_code = 400

class NotFoundError(OrderServiceError):
    """The requested order does not exist"""
    status_code = 404

class InternalError(OrderServiceError):
    """Store or connectivity failure"""
    status_code = 500

class RouteNotFound(OrderServiceError):
    """No handler matches the request"""
    status_code = 404

    def __init__(self, detail: Optional[str] = None):
        super().__init__("Route not found", detail)

def error_body(message: str, detail: Optional[str] = None, **extra) -> dict:
    """Build the standard error payload"""
    body = {"success": False, "message": message}
    if detail:
        body["error"] = detail
    body.update(extra)
    return body

def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts)

async def order_service_error_handler(request: Request, exc: OrderServiceError):
    if exc.status_code >= 500:
        logger.error(f"{exc.message} in {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.detail)
    )

async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    detail = _format_validation_errors(exc)
    logger.warning(f"Rejected request to {request.method} {request.url.path}: {detail}")
    return JSONResponse(
        status_code=ValidationError.status_code,
        content=error_body("Invalid request data", detail)
    )

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and unsupported methods both read as a missing route
    if exc.status_code in (404, 405):
        return await order_service_error_handler(request, RouteNotFound())
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None)
    )

async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    logger.warning(f"Rate limit exceeded for {request.method} {request.url.path}")
    return JSONResponse(
        status_code=429,
        content=error_body("Too many requests", str(exc.detail))
    )

async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last-resort handler so clients never see an empty body"""
    error_id = str(uuid.uuid4())

    logger.error(
        f"Unhandled exception {error_id}: {type(exc).__name__} in {request.method} {request.url.path}",
        extra={
            "error_id": error_id,
            "endpoint": str(request.url.path),
            "method": request.method,
            "error_type": type(exc).__name__,
            "error_message": str(exc)
        },
        exc_info=exc
    )

    return JSONResponse(
        status_code=500,
        content=error_body("Something went wrong!", str(exc) or type(exc).__name__, errorId=error_id)
    )

def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler to the application"""
    app.add_exception_handler(OrderServiceError, order_service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
