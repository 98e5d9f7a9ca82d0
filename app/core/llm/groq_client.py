from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

# Single hardcoded OpenAI-compatible endpoint; never read from the environment.
GROQ_CHAT_COMPLETIONS_URL = "https://api.groq.com/openai/v1/chat/completions"
GROQ_MODEL = "llama-3.3-70b-versatile"


class GroqError(Exception):
    """Base error for Groq client failures."""


class GroqUpstreamError(GroqError):
    """Raised when the Groq call fails in transport or returns a non-2xx status.

    `status_code` is None when no HTTP response was received. `payload` holds the
    upstream error body (parsed JSON, or text when it isn't JSON), or None when
    the upstream sent nothing usable.
    """

    def __init__(self, message: str, *, status_code: int | None = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


@dataclass(frozen=True)
class GroqConfig:
    api_key: str


def build_chat_payload(*, prompt: Any) -> dict[str, Any]:
    """Request body for a single-turn chat completion. `prompt` is relayed verbatim."""
    return {
        "model": GROQ_MODEL,
        "messages": [{"role": "user", "content": prompt}],
    }


def _read_error_payload(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


class GroqClient:
    """
    Minimal Groq chat-completion client.

    Design notes:
    - No logging in this module (prompts/outputs are user content).
    - One request per call: no retries, no timeout override (httpx defaults apply).
    - Returns the upstream body untouched; shape translation belongs to callers.
    """

    def __init__(
        self,
        *,
        config: GroqConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        self._transport = transport

    async def create_chat_completion(self, *, prompt: Any) -> Any:
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }
        payload = build_chat_payload(prompt=prompt)

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                resp = await client.post(GROQ_CHAT_COMPLETIONS_URL, headers=headers, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            # Request-building failures (e.g. a non-ASCII key in the header) count as transport errors.
            raise GroqUpstreamError(str(exc) or type(exc).__name__) from exc

        if not resp.is_success:
            raise GroqUpstreamError(
                f"Request failed with status code {resp.status_code}",
                status_code=resp.status_code,
                payload=_read_error_payload(resp),
            )

        try:
            return resp.json()
        except ValueError:
            # Non-JSON success bodies are relayed as plain strings.
            return resp.text
