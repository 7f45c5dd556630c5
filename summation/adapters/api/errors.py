# summation/adapters/api/errors.py
from typing import Any, Dict, Iterable

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from summation.adapters.api.schemas import error_payload
from summation.core.domain.exceptions import DomainError, ValidationError
from summation.core.use_cases.compute_sum import INVALID_REQUEST_MESSAGE
from summation.shared.config import Settings

logger = structlog.get_logger()

VALIDATION_ERROR = "validation_error"

# Status used when a sum cannot be carried by JSON (float overflow).
UNPROCESSABLE_RESULT_STATUS = 422

_HTTP_ERROR_CODES = {
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
    UNPROCESSABLE_RESULT_STATUS: "unrepresentable_result",
}


def _describe_request_errors(errors: Iterable[Dict[str, Any]]) -> Dict[str, str]:
    """
    Summarizes FastAPI's body errors (bad JSON, non-object body) per location.
    """
    details: Dict[str, str] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = loc[0] if loc and not loc[0].isdigit() else "body"

        kind = error.get("type", "")
        if kind == "missing":
            problem = "field required"
        elif kind == "json_invalid":
            problem = "invalid JSON"
        else:
            problem = "must be an object with numeric 'a' and 'b'"
        details.setdefault(field, problem)
    return details


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """
    Maps Domain Errors and framework errors onto the standard error envelope.
    """

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning(
            "sum_request_rejected",
            path=request.url.path,
            details=exc.details,
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_payload(VALIDATION_ERROR, exc.message, exc.details),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        details = _describe_request_errors(exc.errors())
        logger.warning(
            "sum_request_rejected",
            path=request.url.path,
            details=details,
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_payload(VALIDATION_ERROR, INVALID_REQUEST_MESSAGE, details),
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.error("domain_error", path=request.url.path, error=exc.message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_payload("domain_error", exc.message),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Standardizes HTTP errors (unknown routes, wrong methods, ...).
        """
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(
                _HTTP_ERROR_CODES.get(exc.status_code, "http_error"),
                str(exc.detail),
            ),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions to avoid leaking stack traces in Prod.
        """
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_payload(
                "internal_error",
                str(exc) if settings.DEBUG else "Internal Server Error",
            ),
        )
