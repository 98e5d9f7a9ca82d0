"""CORS configuration."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


def setup_cors(app: FastAPI, *, allow_origins: list[str]) -> None:
    """Configure CORS middleware.

    The frontend calls the relay straight from the browser, so every origin is
    allowed unless CORS_ALLOW_ORIGINS narrows it. Credentials are only allowed for
    an explicit origin list (browsers reject `*` with credentials).
    """

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials="*" not in allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
