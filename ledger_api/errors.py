"""
Exception handlers: map ledger errors to HTTP responses.

Business-rule violations are client errors (422); every other failure,
unknown order ids included, is a server error (500).
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ledger_core.errors import LedgerError, OrderRuleViolation

logger = logging.getLogger(__name__)

EXCEPTION_STATUS: tuple[tuple[type[Exception], int], ...] = (
    (OrderRuleViolation, 422),
    (LedgerError, 500),
)


def register_error_handlers(app: FastAPI) -> None:
    """Register ledger and request-validation handlers on app."""

    for exc_type, status_code in EXCEPTION_STATUS:

        @app.exception_handler(exc_type)
        async def _handler(request: Request, exc: Exception, *, _status: int = status_code) -> JSONResponse:
            logger.warning(
                "%s %s failed with %s (%s): %s",
                request.method,
                request.url.path,
                _status,
                exc.__class__.__name__,
                exc,
            )
            return JSONResponse(status_code=_status, content={"message": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def _validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [{str(err["loc"][-1]) if err["loc"] else "body": err["msg"]} for err in exc.errors()]
        logger.error("Request validation failed on %s: %s", request.url.path, errors)
        return JSONResponse(status_code=422, content={"errors": errors})
