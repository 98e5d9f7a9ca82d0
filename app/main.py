from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.openapi.docs import get_redoc_html

from app.api.exception_handlers import register_exception_handlers
from app.api.schemas import HealthOut
from app.core.cors import setup_cors
from app.core.logging import setup_logging
from app.core.metrics import PrometheusMetricsMiddleware, metrics_router
from app.core.middleware.http_logging import HttpLoggingMiddleware
from app.core.settings import Settings, get_settings
from app.generation.router import router as generation_router

setup_logging()
logger = logging.getLogger("app")

_REDOC_JS_URL = "https://cdn.jsdelivr.net/npm/redoc@2.1.4/bundles/redoc.standalone.js"


def create_app(settings: Settings | None = None) -> FastAPI:
    # Configuration is resolved once here and handed to request handlers via app.state.
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not app.state.settings.groq_api_key:
            # Not fatal: /health and / keep working, /generate answers 500.
            logger.error("GROQ_API_KEY is not set in environment. Set GROQ_API_KEY in .env")
        yield

    app = FastAPI(
        title="Groq Relay API",
        description=(
            "Relays prompts to the Groq chat-completion API and reshapes replies into the "
            "Gemini-like envelope the frontend expects.\n\n"
            "Design principles:\n"
            "- Stateless: one inbound request triggers at most one upstream call.\n"
            "- Fixed upstream endpoint and model; only the API key is configurable.\n"
            "- Logs carry metadata and upstream errors, never prompts or completions."
        ),
        lifespan=lifespan,
        docs_url="/swagger",  # Swagger UI ("Try it out")
        redoc_url=None,  # custom ReDoc page at /docs
        openapi_tags=[
            {
                "name": "health",
                "description": "Basic uptime check for load balancers and monitoring.",
            },
            {
                "name": "generation",
                "description": "Service info and prompt relay to the upstream LLM.",
            },
            {
                "name": "metrics",
                "description": "Prometheus-compatible metrics endpoint.",
            },
        ],
    )
    app.state.settings = settings

    app.add_middleware(PrometheusMetricsMiddleware)
    app.add_middleware(HttpLoggingMiddleware)
    setup_cors(app, allow_origins=settings.cors_allow_origins)

    register_exception_handlers(app)

    @app.get("/docs", include_in_schema=False)
    async def redoc_docs():
        return get_redoc_html(
            openapi_url=app.openapi_url or "/openapi.json",
            title=f"{app.title} - ReDoc",
            redoc_js_url=_REDOC_JS_URL,
        )

    @app.get(
        "/health",
        response_model=HealthOut,
        tags=["health"],
        summary="Health check",
        description=(
            "Lightweight endpoint to verify the API process is running.\n\n"
            "This endpoint intentionally does not check the upstream API or the API key so "
            "it can be used safely for basic uptime checks."
        ),
    )
    async def health() -> HealthOut:
        return HealthOut(status="ok", message="Server is running with Groq Llama model")

    app.include_router(metrics_router)
    app.include_router(generation_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info(f"Server running on http://localhost:{settings.port}")
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        # Keep the JSON logging configured by setup_logging().
        log_config=None,
    )
