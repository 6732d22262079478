"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or upstream details are exposed to clients.
All error responses carry a single ``message`` field.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from problem_proxy.domain.problems.errors import (
    ProblemDomainError,
    ProblemNotFoundError,
    ProblemOperationError,
)

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_500 = 500


def _error_response(status_code: int, message: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"message": message})


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ProblemNotFoundError)
    async def handle_problem_not_found(
        _request: Request, exc: ProblemNotFoundError
    ) -> JSONResponse:
        """Handle missing problem records."""
        logger.warning("Problem not found: %s", exc.problem_id)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(ProblemOperationError)
    async def handle_problem_operation(
        _request: Request, exc: ProblemOperationError
    ) -> JSONResponse:
        # Already logged with its cause by the use case.
        return _error_response(HTTP_500, exc.message)

    @app.exception_handler(ProblemDomainError)
    async def handle_problem_domain(
        _request: Request, exc: ProblemDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled problems domain errors."""
        logger.error("Unhandled problems domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
