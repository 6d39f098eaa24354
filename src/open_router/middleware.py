"""httpx response event hooks used by every client connection."""

from __future__ import annotations

import logging

import httpx

from open_router.errors import status_error, try_parse_json

logger = logging.getLogger(__name__)


def log_error_response(response: httpx.Response) -> None:
    """Log the status and body of an error response without altering it."""
    if not response.is_error:
        return
    response.read()
    logger.error(
        "OpenRouter HTTP error %d for %s %s: %s",
        response.status_code,
        response.request.method,
        response.request.url,
        response.text,
    )


def raise_for_status(response: httpx.Response) -> None:
    """Raise OpenRouterHTTPError for non-2xx responses, with the decoded body."""
    if response.is_success:
        return
    response.read()
    raise status_error(response, try_parse_json(response.content))
