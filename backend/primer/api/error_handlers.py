"""Error Handlers: map Primer failures onto the uniform REST error envelope.

Invariants:
    - PrimerError: status from the error, body from to_response(), log level from severity
    - RequestValidationError: 400 VALIDATION_ERROR, one detail per offending argument
    - Anything else: 500 INTERNAL_ERROR, logged with traceback, message never echoed
    - Every handled failure is logged with the request path and its error code

Design Decisions:
    - Handlers are plain module functions added with app.add_exception_handler,
      so tests can call them without building an app
    - Severity drives the log level: a missing model (warning) stays out of
      error dashboards, an overflowed calculation (error) does not
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from primer.core.errors import ErrorCategory, ErrorSeverity, PrimerError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Install the three handlers, most specific first."""
    app.add_exception_handler(PrimerError, primer_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def primer_error_handler(request: Request, exc: PrimerError) -> JSONResponse:
    logger.log(
        _LOG_LEVELS[exc.severity],
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={"path": request.url.path, **exc.log_extra()},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def validation_error_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = _validation_details(exc)
    logger.warning(
        f"VALIDATION_ERROR on {request.url.path}: "
        f"{', '.join(d['field'] for d in details)}",
        extra={
            "path": request.url.path,
            "error_code": "VALIDATION_ERROR",
            "argument": details[0]["argument"] if details else None,
        },
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request data",
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.ERROR.value,
                "details": details,
            },
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: the response never carries the exception text."""
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}",
        exc_info=exc,
        extra={"path": request.url.path, "error_code": "INTERNAL_ERROR"},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )


def _validation_details(exc: RequestValidationError) -> list[dict]:
    """One entry per pydantic error; argument is the innermost named location."""
    details = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"]]
        named = [part for part in loc if not part.isdigit()]
        details.append({
            "field": ".".join(loc),
            "argument": named[-1] if named else None,
            "message": e["msg"],
            "type": e["type"],
        })
    return details
