"""Exceptions raised by the OpenRouter client."""

from __future__ import annotations

import json
from typing import Any

import httpx


class OpenRouterError(Exception):
    """Base class for errors raised by this package."""


class MissingAccessTokenError(OpenRouterError):
    """Raised when a request is built without an access token."""

    def __init__(self) -> None:
        super().__init__(
            "No OpenRouter access token configured. Set one of:\n"
            "  export OPENROUTER_API_KEY='sk-or-...'\n"
            "  access_token: sk-or-...   (in ~/.config/open_router/config.yaml)"
        )


class ServerError(OpenRouterError):
    """OpenRouter answered successfully but the payload reports a failure."""


class OpenRouterHTTPError(httpx.HTTPStatusError):
    """Non-2xx response. ``body`` is the decoded JSON error or the raw text."""

    def __init__(self, message: str, *, response: httpx.Response, body: Any) -> None:
        super().__init__(message, request=response.request, response=response)
        self.body = body

    @property
    def status_code(self) -> int:
        return self.response.status_code


def try_parse_json(raw: bytes | str) -> Any:
    """Decode *raw* as JSON, falling back to the raw text."""
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def status_error(response: httpx.Response, body: Any) -> OpenRouterHTTPError:
    """Build the error for a failed *response*, worded like httpx's own."""
    kind = "Client error" if response.is_client_error else "Server error"
    if not response.is_error:
        kind = "Unexpected status"
    message = (
        f"{kind} '{response.status_code} {response.reason_phrase}' "
        f"for url '{response.request.url}'"
    )
    return OpenRouterHTTPError(message, response=response, body=body)
