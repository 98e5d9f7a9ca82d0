"""Send a prompt to a running relay and print the extracted text.

Local smoke check for the /generate round trip:
- Relay URL comes from RELAY_URL (default http://localhost:3000)
- Prompt is taken from the command line arguments
- Exits non-zero with the relay's error envelope when the call fails
"""

from __future__ import annotations

import asyncio
import json
import os
import sys

import httpx


async def send_prompt(*, relay_url: str, prompt: str) -> dict:
    """POST the prompt to /generate and return the decoded response envelope."""
    # LLM completions often exceed httpx's 5s default.
    async with httpx.AsyncClient(base_url=relay_url, timeout=60.0) as client:
        res = await client.post("/generate", json={"prompt": prompt})

    payload = res.json()
    if res.status_code != 200:
        raise SystemExit(f"Relay returned {res.status_code}: {json.dumps(payload)}")
    return payload


def main() -> None:
    """Entry point."""
    prompt = " ".join(sys.argv[1:]).strip()
    if not prompt:
        raise SystemExit("usage: python scripts/send_prompt.py <prompt>")

    relay_url = os.getenv("RELAY_URL", "http://localhost:3000")
    payload = asyncio.run(send_prompt(relay_url=relay_url, prompt=prompt))
    print(payload["candidates"][0]["content"]["parts"][0]["text"])


if __name__ == "__main__":
    main()
