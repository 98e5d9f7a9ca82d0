from __future__ import annotations

from typing import Any

MISSING_API_KEY_MESSAGE = "GROQ_API_KEY is not set on the server."


def has_error_payload(payload: Any) -> bool:
    """True when an upstream error body is worth forwarding.

    Containers count even when empty (`{}`, `[]`); None, "", 0 and False do not.
    """
    return isinstance(payload, (dict, list)) or bool(payload)


class RelayError(Exception):
    """Failure surfaced to the caller as `{"error": <error>}` with `status_code`."""

    def __init__(self, *, status_code: int, error: Any):
        super().__init__(error)
        self.status_code = status_code
        self.error = error


class RelayConfigurationError(RelayError):
    """Raised when the relay cannot call upstream because it is misconfigured."""

    def __init__(self, message: str = MISSING_API_KEY_MESSAGE):
        super().__init__(status_code=500, error=message)


class RelayRequestValidationError(RelayError):
    """Raised when the inbound request body is unusable."""

    def __init__(self, message: str):
        super().__init__(status_code=400, error=message)


class UpstreamRelayError(RelayError):
    """Upstream failure: forwards the upstream status (500 without one) and error body."""

    def __init__(self, *, status_code: int | None, payload: Any, message: str):
        error = payload if has_error_payload(payload) else {"error": message}
        super().__init__(status_code=status_code or 500, error=error)
        self.upstream_status = status_code
        self.message = message
