"""Global exception handlers — translate domain errors to HTTP responses.

Every failure is answered with a JSON object carrying at least an
``error`` key.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from level_blueprint.domain.exceptions import (
    MissingCredentialError,
    MissingFieldError,
    TransportError,
    UnexpectedError,
    UpstreamError,
)

logger = logging.getLogger(__name__)


def _error_json(status_code: int, error: str, **extra: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, **extra})


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Request validation ──────────────────────────────────────────────

    @app.exception_handler(MissingCredentialError)
    async def missing_credential_handler(
        request: Request, exc: MissingCredentialError
    ) -> JSONResponse:
        logger.warning("Rejected request without API key")
        return _error_json(400, "No API key provided", message=str(exc))

    @app.exception_handler(MissingFieldError)
    async def missing_field_handler(request: Request, exc: MissingFieldError) -> JSONResponse:
        logger.warning("Rejected request with missing fields")
        return _error_json(400, "Missing required fields")

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(400, "Invalid request body", detail="; ".join(messages))

    # ── Upstream ────────────────────────────────────────────────────────

    @app.exception_handler(UpstreamError)
    async def upstream_handler(request: Request, exc: UpstreamError) -> JSONResponse:
        return _error_json(500, "OpenAI API error", detail=exc.detail)

    @app.exception_handler(TransportError)
    async def transport_handler(request: Request, exc: TransportError) -> JSONResponse:
        return _error_json(500, "Server error", detail=str(exc))

    @app.exception_handler(UnexpectedError)
    async def unexpected_handler(request: Request, exc: UnexpectedError) -> JSONResponse:
        return _error_json(500, "Server error", detail=str(exc))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Server error")
        return _error_json(500, "Server error", detail=str(exc))
