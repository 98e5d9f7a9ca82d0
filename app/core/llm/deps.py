from __future__ import annotations

from fastapi import Request

from app.core.llm.groq_client import GroqClient, GroqConfig
from app.core.settings import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings built once by create_app() and attached to the application state."""
    return request.app.state.settings


def get_groq_client(request: Request) -> GroqClient | None:
    """
    Dependency provider for GroqClient.

    Returns None when GROQ_API_KEY is not configured so the route can answer with
    the configuration error without raising during dependency resolution.
    """

    settings = get_app_settings(request)
    if not settings.groq_api_key:
        return None

    return GroqClient(config=GroqConfig(api_key=settings.groq_api_key))
