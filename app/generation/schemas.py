from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class GenerateIn(BaseModel):
    """Inbound generate request. Unknown fields are ignored."""

    prompt: Any = Field(
        description=(
            "Prompt relayed verbatim as the user message content. Usually a string; any "
            "non-null JSON value is accepted and forwarded unchanged."
        ),
        examples=["Suggest a three-day itinerary for Lisbon."],
    )

    @field_validator("prompt")
    @classmethod
    def _prompt_not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("prompt must not be null")
        return value


class Part(BaseModel):
    text: str


class Content(BaseModel):
    parts: list[Part]


class Candidate(BaseModel):
    content: Content


class NormalizedResponse(BaseModel):
    """Gemini-like envelope the frontend consumes, independent of the upstream provider."""

    candidates: list[Candidate] = Field(min_length=1, max_length=1)
    raw: Any = Field(default=None, description="Untouched upstream response body.")


class WelcomeOut(BaseModel):
    message: str
    endpoint: str = Field(examples=["/generate"])
    model: str = Field(examples=["llama-3.3-70b-versatile"])


class ErrorOut(BaseModel):
    """Error envelope shared by every failing relay response."""

    error: Any = Field(
        description=(
            "Upstream error body when one was returned, otherwise an object or string "
            "describing the failure."
        ),
    )
