from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.exceptions import (
    RelayConfigurationError,
    RelayError,
    RelayRequestValidationError,
)

logger = logging.getLogger("app.request_validation")

INVALID_GENERATE_BODY_MESSAGE = "Request body must be a JSON object with a non-null 'prompt' field."


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers."""

    @app.exception_handler(RelayError)
    async def handle_relay_error(request: Request, exc: RelayError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": jsonable_encoder(exc.error)},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        # Unparseable JSON fails before dependencies run; a missing key still takes precedence.
        if not request.app.state.settings.groq_api_key:
            return await handle_relay_error(request, RelayConfigurationError())

        # Do not log the request body: it holds the prompt.
        logger.info(
            "Request validation failed",
            extra={
                "request_id": getattr(request.state, "request_id", None),
                "http_method": request.method,
                "request_path": request.url.path,  # no query string
                "status_code": 400,
                "error": "request_validation",
            },
        )
        return await handle_relay_error(
            request, RelayRequestValidationError(INVALID_GENERATE_BODY_MESSAGE)
        )
