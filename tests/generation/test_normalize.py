from __future__ import annotations

import json

import pytest

from app.generation.normalize import (
    MessageContent,
    PlainText,
    RawString,
    Unknown,
    classify_upstream_body,
    extract_text,
    normalize_upstream_response,
)


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        ({"choices": [{"message": {"content": "hi"}}]}, MessageContent(text="hi")),
        ({"choices": [{"text": "legacy"}]}, PlainText(text="legacy")),
        # Empty message content falls through to the legacy text field.
        ({"choices": [{"message": {"content": ""}, "text": "legacy"}]}, PlainText(text="legacy")),
        ("plain upstream text", RawString(text="plain upstream text")),
        ("", RawString(text="")),
        ({"choices": []}, Unknown(body={"choices": []})),
        ({"choices": [{"message": {"content": None}}]}, Unknown(body={"choices": [{"message": {"content": None}}]})),
        ([1, 2], Unknown(body=[1, 2])),
        (None, Unknown(body=None)),
    ],
    ids=[
        "message-content",
        "plain-text",
        "empty-content",
        "raw-string",
        "empty-raw-string",
        "no-choices",
        "null-content",
        "list-body",
        "null-body",
    ],
)
def test_classify_upstream_body(body, expected) -> None:
    assert classify_upstream_body(body) == expected


def test_extract_text_for_unknown_is_compact_json() -> None:
    body = {"object": "chat.completion", "choices": [{"index": 0}]}
    assert extract_text(Unknown(body=body)) == '{"object":"chat.completion","choices":[{"index":0}]}'


def test_extract_text_for_null_body() -> None:
    assert extract_text(Unknown(body=None)) == "null"


def test_extract_text_rejects_unhandled_shape() -> None:
    with pytest.raises(TypeError):
        extract_text(object())  # type: ignore[arg-type]


def test_normalize_upstream_response_has_single_candidate() -> None:
    body = {"choices": [{"message": {"role": "assistant", "content": "world"}}], "usage": {}}
    out = normalize_upstream_response(body)

    assert out.model_dump() == {
        "candidates": [{"content": {"parts": [{"text": "world"}]}}],
        "raw": body,
    }


def test_normalize_upstream_response_fallback_text_matches_body_json() -> None:
    body = {"error": None, "choices": [{"message": {}}]}
    out = normalize_upstream_response(body)

    assert len(out.candidates) == 1
    assert out.candidates[0].content.parts[0].text == json.dumps(body, separators=(",", ":"))
