from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from app.core.settings import Settings
from tests._helpers import TEST_API_KEY, UpstreamRecorder


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    # A developer's real key or port must never leak into tests.
    for name in ("GROQ_API_KEY", "PORT", "HOST", "CORS_ALLOW_ORIGINS", "APP_ENV"):
        monkeypatch.delenv(name, raising=False)
    # Settings are cached via @lru_cache; clear so each test sees its own environment.
    from app.core.settings import get_settings

    get_settings.cache_clear()


@pytest.fixture
def make_upstream() -> Callable[..., UpstreamRecorder]:
    def _make(
        *,
        status_code: int = 200,
        json_body: Any = None,
        text: str | None = None,
        exc: Exception | None = None,
    ) -> UpstreamRecorder:
        def respond(request: httpx.Request) -> httpx.Response:
            if exc is not None:
                raise exc
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json_body)

        return UpstreamRecorder(respond)

    return _make


@pytest.fixture
def settings() -> Settings:
    return Settings(groq_api_key=TEST_API_KEY)


@pytest.fixture
def unconfigured_settings() -> Settings:
    return Settings(groq_api_key=None)


@pytest.fixture
def client(settings: Settings):
    from fastapi.testclient import TestClient

    from app.main import create_app

    app = create_app(settings)
    with TestClient(app) as c:
        yield c
