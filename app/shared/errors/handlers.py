"""
Centralized error handlers for FastAPI.

Maps errors that escape the secrets dispatcher to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.secrets.errors import SecretsDomainError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500


def error_response(status_code: int, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response.

    The ``error`` field is the standard reason phrase of the status code.
    """
    try:
        error = HTTPStatus(status_code).phrase
    except ValueError:
        error = "Error"
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report request validation failures as bad requests."""
        logger.warning("Request validation failed: %d errors", len(exc.errors()))
        return error_response(HTTP_400, "Malformed request")

    @app.exception_handler(SecretsDomainError)
    async def handle_secrets_domain(
        _request: Request, exc: SecretsDomainError
    ) -> JSONResponse:
        """Catch-all for secrets domain errors that escaped the dispatcher."""
        logger.error("Unhandled secrets domain error: %s", type(exc).__name__)
        return error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(HTTP_500, "Internal server error")
