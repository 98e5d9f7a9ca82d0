from __future__ import annotations

import logging
import time
from typing import Any, Protocol

from app.core.llm.groq_client import GroqUpstreamError
from app.core.metrics import upstream_request_duration_seconds, upstream_requests_total
from app.domain.exceptions import UpstreamRelayError, has_error_payload
from app.generation.normalize import normalize_upstream_response
from app.generation.schemas import NormalizedResponse

logger = logging.getLogger("app.generation")


class ChatCompletionClient(Protocol):
    async def create_chat_completion(self, *, prompt: Any) -> Any: ...


class GenerationService:
    """One prompt in, one upstream call, one normalized envelope out."""

    def __init__(self, *, llm_client: ChatCompletionClient):
        self._llm = llm_client

    async def generate(self, *, prompt: Any, request_id: str | None = None) -> NormalizedResponse:
        started = time.perf_counter()
        try:
            body = await self._llm.create_chat_completion(prompt=prompt)
        except GroqUpstreamError as exc:
            outcome = "transport_error" if exc.status_code is None else "http_error"
            self._observe(outcome=outcome, started=started)
            logger.error(
                "Groq request failed",
                extra={
                    "request_id": request_id,
                    "upstream_status": exc.status_code,
                    "error": exc.payload if has_error_payload(exc.payload) else exc.message,
                },
            )
            raise UpstreamRelayError(
                status_code=exc.status_code, payload=exc.payload, message=exc.message
            ) from exc

        self._observe(outcome="success", started=started)
        return normalize_upstream_response(body)

    @staticmethod
    def _observe(*, outcome: str, started: float) -> None:
        upstream_requests_total.labels(outcome=outcome).inc()
        upstream_request_duration_seconds.labels(outcome=outcome).observe(
            time.perf_counter() - started
        )
