"""Translate an upstream chat-completion body into the frontend envelope.

The upstream body is untyped, so it is first classified into exactly one shape:

- MessageContent: `choices[0].message.content` is a non-empty string (chat API)
- PlainText: `choices[0].text` is a non-empty string (legacy completion API)
- RawString: the body itself is a string (non-JSON upstream response)
- Unknown: anything else; the text becomes the compact JSON of the whole body

Empty `content` or `text` values fall through to the next shape.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

from app.generation.schemas import Candidate, Content, NormalizedResponse, Part


@dataclass(frozen=True)
class MessageContent:
    text: str


@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class RawString:
    text: str


@dataclass(frozen=True)
class Unknown:
    body: Any


UpstreamShape = Union[MessageContent, PlainText, RawString, Unknown]


def _first_choice(body: Any) -> dict[str, Any] | None:
    if not isinstance(body, dict):
        return None
    choices = body.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    return first if isinstance(first, dict) else None


def _non_empty_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def classify_upstream_body(body: Any) -> UpstreamShape:
    choice = _first_choice(body)
    if choice is not None:
        message = choice.get("message")
        if isinstance(message, dict):
            content = _non_empty_str(message.get("content"))
            if content is not None:
                return MessageContent(text=content)
        text = _non_empty_str(choice.get("text"))
        if text is not None:
            return PlainText(text=text)

    if isinstance(body, str):
        return RawString(text=body)

    return Unknown(body=body)


def dump_compact_json(value: Any) -> str:
    # Same separators as JSON.stringify, which the frontend has always received.
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def extract_text(shape: UpstreamShape) -> str:
    if isinstance(shape, (MessageContent, PlainText, RawString)):
        return shape.text
    if isinstance(shape, Unknown):
        return dump_compact_json(shape.body)
    raise TypeError(f"Unhandled upstream shape: {type(shape).__name__}")


def normalize_upstream_response(body: Any) -> NormalizedResponse:
    text = extract_text(classify_upstream_body(body))
    return NormalizedResponse(
        candidates=[Candidate(content=Content(parts=[Part(text=text)]))],
        raw=body,
    )
