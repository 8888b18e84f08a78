"""Exception handlers rendering failures in the character response envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from roster.exceptions import RosterServiceError
from roster.schemas import ApiResponse

logger = logging.getLogger(__name__)


async def roster_error_handler(request: Request, exc: RosterServiceError) -> JSONResponse:
    log_level = logging.WARNING if exc.status_code < 500 else logging.ERROR
    logger.log(
        log_level,
        f"HTTP {exc.status_code}: {exc.error}",
        extra={
            "http.request.method": request.method,
            "url.path": request.url.path,
            "http.response.status_code": exc.status_code,
        },
    )
    content = ApiResponse(success=False, error=exc.error, details=exc.details).to_content()
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies as 400 in the envelope instead of FastAPI's 422."""
    errors = exc.errors()
    first_error = errors[0] if errors else {}
    location = ".".join(str(part) for part in first_error.get("loc", ()))
    message = first_error.get("msg", "Validation error")
    details = f"{location}: {message}" if location else message

    logger.warning(
        f"Invalid request body: {details}",
        extra={
            "http.request.method": request.method,
            "url.path": request.url.path,
            "http.response.status_code": status.HTTP_400_BAD_REQUEST,
        },
    )
    content = ApiResponse(success=False, error="Invalid request body", details=details)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content.to_content())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RosterServiceError, roster_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
