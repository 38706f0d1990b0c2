"""
Exception Handlers.

FastAPI exception handlers that convert exceptions to RFC 7807 problem
documents (application/problem+json). Every failure is logged; 5xx with
the full exception regardless of what the caller is shown.

Mapping:
    ApplicationError subclasses   → EXCEPTION_STATUS_MAP
    ValueError                    → 400 (bad argument / invalid state)
    KeyError                      → 404 (missing key)
    PermissionError               → 401 (unauthorized access)
    RequestValidationError        → 400 (malformed request)
    anything else                 → 500

Usage:
    from modules.backend.core.exception_handlers import register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)
"""

import traceback
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from modules.backend.core.config import get_app_config
from modules.backend.core.exceptions import (
    ApplicationError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from modules.backend.core.logging import get_logger
from modules.backend.schemas.base import (
    PROBLEM_MEDIA_TYPE,
    PROBLEM_TYPE_BASE,
    FieldError,
    ProblemDetail,
)

logger = get_logger(__name__)

GENERIC_ERROR_DETAIL = "An error occurred processing your request."

# Map exception types to HTTP status codes
EXCEPTION_STATUS_MAP: dict[type[ApplicationError], int] = {
    NotFoundError: 404,
    ValidationError: 400,
    ConflictError: 409,
    DatabaseError: 503,
}

# Checked in order; first isinstance match wins
BUILTIN_STATUS_MAP: tuple[tuple[type[Exception], int], ...] = (
    (PermissionError, 401),
    (ValueError, 400),
    (KeyError, 404),
)


def _get_request_id(request: Request) -> str | None:
    """Extract request ID from request state or headers."""
    # Try request state first (set by middleware)
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        return request_id
    # Fall back to header
    return request.headers.get("x-request-id")


def _status_title(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "An error occurred"


def _detailed_errors() -> bool:
    return get_app_config().detailed_errors


def build_problem(
    request: Request,
    status_code: int,
    detail: str,
    **extensions: Any,
) -> ProblemDetail:
    """Build a problem document for the current request."""
    return ProblemDetail(
        type=f"{PROBLEM_TYPE_BASE}{status_code}",
        title=_status_title(status_code),
        status=status_code,
        detail=detail,
        instance=request.url.path,
        trace_id=_get_request_id(request),
        **extensions,
    )


def problem_response(problem: ProblemDetail, headers: dict[str, str] | None = None) -> JSONResponse:
    """Render a problem document as an application/problem+json response."""
    return JSONResponse(
        status_code=problem.status,
        content=problem.to_content(),
        media_type=PROBLEM_MEDIA_TYPE,
        headers=headers,
    )


def _exception_problem(request: Request, exc: Exception, status_code: int) -> ProblemDetail:
    """Problem document for a non-application exception, detailed only outside production."""
    if not _detailed_errors():
        return build_problem(request, status_code, GENERIC_ERROR_DETAIL)

    return build_problem(
        request,
        status_code,
        str(exc) or GENERIC_ERROR_DETAIL,
        exception=type(exc).__name__,
        stack_trace="".join(traceback.format_exception(exc)),
    )


async def application_error_handler(
    request: Request,
    exc: ApplicationError,
) -> JSONResponse:
    """
    Handle all ApplicationError subclasses.

    The exception message is always the detail: these messages are
    written for callers.
    """
    status_code = EXCEPTION_STATUS_MAP.get(type(exc), 500)

    log_extra = {
        "code": exc.code,
        "message": exc.message,
        "status": status_code,
        "path": request.url.path,
        "method": request.method,
        "request_id": _get_request_id(request),
    }

    if status_code >= 500:
        logger.error("Server error", extra=log_extra, exc_info=exc)
    else:
        logger.warning("Client error", extra=log_extra)

    problem = build_problem(request, status_code, exc.message, code=exc.code)
    return problem_response(problem)


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Handle FastAPI request validation errors (malformed body or path).

    Reported as 400 with the failing fields listed under ``errors``.
    """
    errors = exc.errors()
    field_errors = [
        FieldError(
            field=".".join(str(loc) for loc in err.get("loc", [])),
            message=err.get("msg", "Validation error"),
            type=err.get("type", "unknown"),
        )
        for err in errors
    ]

    logger.warning(
        "Request validation failed",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_count": len(errors),
            "request_id": _get_request_id(request),
        },
    )

    problem = build_problem(
        request,
        400,
        "Request validation failed",
        code="VAL_REQUEST_INVALID",
        errors=field_errors,
    )
    return problem_response(problem)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Handle routing-level HTTP errors (unknown path, wrong method)."""
    detail = exc.detail if isinstance(exc.detail, str) else _status_title(exc.status_code)
    problem = build_problem(request, exc.status_code, detail)
    return problem_response(problem, headers=getattr(exc, "headers", None))


async def builtin_error_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """
    Handle uncaught built-in exceptions that carry a meaning.

    Bad argument → 400, missing key → 404, permission → 401.
    """
    status_code = next(
        (status for exc_type, status in BUILTIN_STATUS_MAP if isinstance(exc, exc_type)),
        500,
    )

    logger.error(
        "Unhandled exception mapped to client error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
            "status": status_code,
            "request_id": _get_request_id(request),
        },
        exc_info=exc,
    )

    return problem_response(_exception_problem(request, exc, status_code))


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Catches all unhandled exceptions and returns a 500 problem document.
    In production, details are hidden.
    """
    logger.error(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
            "request_id": _get_request_id(request),
        },
        exc_info=exc,
    )

    return problem_response(_exception_problem(request, exc, 500))


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI app.

    Starlette picks the handler registered for the most specific class in
    the exception's MRO, so PydanticValidationError (a ValueError) is
    routed to the 500 handler rather than the 400 one.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    for exc_type, _status in BUILTIN_STATUS_MAP:
        app.add_exception_handler(exc_type, builtin_error_handler)
    app.add_exception_handler(PydanticValidationError, unhandled_exception_handler)

    # Catch-all for unexpected exceptions
    app.add_exception_handler(Exception, unhandled_exception_handler)

    logger.debug("Exception handlers registered")
