"""Plain-text error responses and exception handler registration."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not Found"
MALFORMED_BODY_PREFIX = "Malformed request body"

# Unsupported methods on a known path are reported as unmatched routes.
_UNMATCHED_ROUTE_STATUSES = {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}


def _text_response(status_code: int, message: str) -> PlainTextResponse:
    return PlainTextResponse(content=message, status_code=status_code)


def _validation_issues(exc: RequestValidationError) -> list[str]:
    issues: list[str] = []
    for issue in exc.errors():
        message = str(issue.get("msg", "Invalid value"))
        if issue.get("type") == "json_invalid":
            issues.append(message)
            continue
        field = _format_location(issue.get("loc", ()))
        issues.append(f"{field}: {message}")
    return issues


def _format_location(location: tuple[Any, ...] | list[Any] | Any) -> str:
    if not isinstance(location, (tuple, list)):
        return str(location)

    prefixes = {"body", "query", "path", "header", "cookie"}
    filtered = [str(part) for part in location if part not in prefixes]
    if filtered:
        return ".".join(filtered)

    if not location:
        return "request"

    return str(location[0])


async def request_validation_exception_handler(_: Request, exc: RequestValidationError) -> PlainTextResponse:
    """Report undecodable request bodies as client errors."""
    issues = _validation_issues(exc) or ["Invalid value"]
    logger.info("Rejected undecodable request body: %s", issues)
    return _text_response(
        status.HTTP_400_BAD_REQUEST,
        f"{MALFORMED_BODY_PREFIX}: {'; '.join(issues)}",
    )


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render routing and HTTP errors as plain text."""
    if exc.status_code in _UNMATCHED_ROUTE_STATUSES:
        return _text_response(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)

    message = str(exc.detail) if isinstance(exc.detail, str) and exc.detail else "Request failed"
    return _text_response(exc.status_code, message)


async def unhandled_exception_handler(_: Request, exc: Exception) -> PlainTextResponse:
    """Log the fault and answer with its message."""
    logger.exception("An unhandled exception has occurred while executing the request.", exc_info=exc)
    return _text_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Attach all error handlers to a FastAPI app instance."""

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
