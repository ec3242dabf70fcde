# portfolio/core/error_handlers.py
import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio.core.error_messages import ErrorMessages
from portfolio.core.exceptions import PersistenceError, PortfolioError

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


def _error_body(message: str, kind: str, **extra) -> dict:
    return {"message": message, "kind": kind, **extra}


def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "path", "query")]
    return ".".join(parts) or "body"


def summarize_validation_errors(errors) -> tuple[str, list[dict]]:
    """Turn pydantic error dicts into a one-line message plus per-field details."""
    details = []
    missing = []
    for err in errors:
        field = _field_name(err.get("loc", ()))
        msg = err.get("msg", "")
        if msg.startswith(_VALUE_ERROR_PREFIX):
            msg = msg[len(_VALUE_ERROR_PREFIX):]
        if err.get("type") == "missing":
            missing.append(field)
        details.append({"field": field, "message": msg})

    if missing:
        message = ErrorMessages.MISSING_FIELDS.format(fields=", ".join(missing))
    elif details:
        message = details[0]["message"] or ErrorMessages.VALIDATION_FAILED
    else:
        message = ErrorMessages.VALIDATION_FAILED
    return message, details


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail), "http_error"),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message, details = summarize_validation_errors(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(message, "validation_error", errors=details),
    )


async def portfolio_exception_handler(request: Request, exc: PortfolioError):
    if isinstance(exc, PersistenceError):
        logger.error(
            "Persistence failure during %s (%s %s)",
            exc.operation,
            request.method,
            request.url.path,
            exc_info=exc.cause or exc,
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.message, exc.kind),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(ErrorMessages.SERVER_ERROR, "server_error"),
    )
