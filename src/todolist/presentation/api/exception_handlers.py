"""Centralized exception handlers for the FastAPI application.

Domain exceptions are mapped to HTTP responses by their ``ErrorKind``
through a single total mapping, so every endpoint answers errors in the
same envelope.

Error Response Format:
    {
        "success": false,
        "message": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Usage:
    from todolist.presentation.api.exception_handlers import (
        setup_exception_handlers,
    )

    app = FastAPI()
    setup_exception_handlers(app, settings)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todolist.domain.shared.exceptions import DomainException, ErrorCode, ErrorKind
from todolist_config.settings import Settings

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

# Every ErrorKind must appear here
ERROR_KIND_TO_STATUS: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.AUTHENTICATION_FAILED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.FAULT: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Codes that describe a missing or unusable bearer token
_BEARER_CHALLENGE_CODES = frozenset(
    {ErrorCode.AUTHENTICATION_FAILED, ErrorCode.INVALID_TOKEN},
)


def status_for_kind(kind: ErrorKind) -> int:
    return ERROR_KIND_TO_STATUS[kind]


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "message": message,
            "code": code,
        },
        headers=headers,
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        # Drop the "body"/"path" prefix from the location
        loc = [str(p) for p in error.get("loc", ()) if p not in ("body", "path")]
        field = ".".join(loc)
        parts.append(f"{field}: {error.get('msg')}" if field else error.get("msg"))
    return "; ".join(parts) or "Invalid request"


def setup_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    settings
        Controls whether fault messages are exposed (never in production)
    """

    def _fault_message(message: str) -> str:
        return INTERNAL_ERROR_MESSAGE if settings.is_production else message

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response."""
        status_code = status_for_kind(exc.kind)

        if exc.kind is ErrorKind.FAULT:
            logger.error(
                "Fault on %s %s: %s (code=%s, details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code.value,
                exc.details,
            )
            return _create_error_response(
                status_code=status_code,
                message=_fault_message(exc.message),
                code=exc.code.value,
            )

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        headers = None
        if exc.code in _BEARER_CHALLENGE_CODES:
            headers = {"WWW-Authenticate": "Bearer"}

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Malformed bodies and path parameters are plain invalid input (400)."""
        message = _format_validation_errors(exc)
        logger.warning(
            "Validation failed on %s %s: %s",
            request.method,
            request.url.path,
            message,
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=message,
            code=ErrorCode.INVALID_INPUT.value,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return _create_error_response(
                status_code=status.HTTP_404_NOT_FOUND,
                message="Endpoint not found",
                code=ErrorCode.ENDPOINT_NOT_FOUND.value,
            )

        code = (
            ErrorCode.INTERNAL_ERROR
            if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR
            else ErrorCode.INVALID_INPUT
        )
        return _create_error_response(
            status_code=exc.status_code,
            message=str(exc.detail),
            code=code.value,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=_fault_message(str(exc) or exc.__class__.__name__),
            code=ErrorCode.INTERNAL_ERROR.value,
        )
