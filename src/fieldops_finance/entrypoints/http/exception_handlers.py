"""FastAPI exception handlers.

Every failure leaves the API as ``{"detail": ..., "code": ..., "errors"?: [...]}``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fieldops_finance.domain.errors import DomainError

logger = logging.getLogger(__name__)

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _request_context(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a DomainError using its error_code; unknown codes become 400."""
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)
    error_dict = exc.to_dict()

    if status_code >= 500:
        logger.error(
            "Domain error occurred",
            extra={
                "error_code": exc.error_code,
                "message": exc.message,
                "context": exc.context,
                **_request_context(request),
            },
        )
    else:
        logger.info(
            "Client error",
            extra={"error_code": exc.error_code, "message": exc.message, **_request_context(request)},
        )

    content: dict[str, Any] = {"detail": exc.message, "code": exc.error_code}
    if "errors" in error_dict:
        content["errors"] = error_dict["errors"]

    return JSONResponse(status_code=status_code, content=content)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Flatten pydantic errors into the field list format.

    Examples:
        - subtotal_parts="abc" (fails the decimal pattern)
        - financials.start_date="31/01/2024" (not an ISO date)
        - Missing required field
    """
    errors = [
        {
            # Drop the 'body'/'query'/'path' prefix pydantic puts on locations
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query", "path")),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info("Request validation error", extra={"errors": errors, **_request_context(request)})

    return JSONResponse(
        status_code=422,  # HTTP_422_UNPROCESSABLE_CONTENT
        content={
            "detail": "Invalid request parameters",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """ValueError escaping a conversion (e.g. date.fromisoformat) is the client's input."""
    logger.info("Value error", extra={"message": str(exc), **_request_context(request)})

    return JSONResponse(
        status_code=422,  # HTTP_422_UNPROCESSABLE_CONTENT
        content={"detail": str(exc), "code": "INVALID_VALUE"},
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log with traceback, answer with a generic 500."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={"error_type": type(exc).__name__, "message": str(exc), **_request_context(request)},
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on ``app``. Call once per app."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(ValueError, handle_value_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
