"""Request building, transport and response unwrapping for the OpenRouter API."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

import httpx

from open_router.config import Configuration
from open_router.middleware import log_error_response, raise_for_status
from open_router.models import FileUpload, StreamCallback, StreamFlag, stream_option
from open_router.streaming import JSONStream

logger = logging.getLogger(__name__)

_TITLE = "OpenRouter Python Client"
_REFERER = "https://pypi.org/project/open-router-client/"


def build_url(uri_base: str, api_version: str, path: str) -> str:
    """Join URL segments with single separators; nothing else is normalized."""
    parts = [uri_base.rstrip("/"), api_version.strip("/"), path.lstrip("/")]
    return "/".join(part for part in parts if part)


class HTTPClient:
    """Issues single-shot requests against the OpenRouter REST API.

    Every call opens its own ``httpx.Client`` and closes it before returning,
    so instances can be shared between threads.
    """

    def __init__(self, config: Configuration | None = None, **overrides: Any) -> None:
        config = config or Configuration()
        self.config = config.model_copy(update=overrides) if overrides else config

    # -- Public verbs --------------------------------------------------------

    def get(self, path: str) -> Any:
        with self._connection() as client:
            response = client.get(self._uri(path), headers=self._headers())
        return self._unwrap(response)

    def delete(self, path: str) -> Any:
        with self._connection() as client:
            response = client.delete(self._uri(path), headers=self._headers())
        return self._unwrap(response)

    def post(self, path: str, parameters: Mapping[str, Any]) -> Any:
        """POST *parameters* as JSON.

        With a :class:`StreamCallback` under ``stream``, the response is read
        as an event stream, each event goes to the callback, and ``None`` is
        returned.
        """
        body = dict(parameters)
        stream = stream_option(body.pop("stream", None))
        if isinstance(stream, StreamCallback):
            # OpenRouter only streams when the body says so
            body["stream"] = True
            return self._post_stream(path, body, stream)
        if isinstance(stream, StreamFlag):
            body["stream"] = stream.enabled

        with self._connection() as client:
            response = client.post(self._uri(path), headers=self._headers(), json=body)
        return self._unwrap(response)

    def multipart_post(self, path: str, parameters: Mapping[str, Any] | None = None) -> Any:
        """POST *parameters* as multipart/form-data; FileUpload values become file parts."""
        fields, files = self._multipart_parameters(parameters)
        if not files:
            # httpx only builds a multipart body around file parts; filename-less
            # parts render as plain form fields
            files = {key: (None, str(value)) for key, value in fields.items()}
            fields = {}
        headers = self._headers()
        # httpx reuses a boundary given in the Content-Type header
        headers["Content-Type"] = f"multipart/form-data; boundary={os.urandom(16).hex()}"
        with self._connection() as client:
            response = client.post(
                self._uri(path),
                headers=headers,
                data=fields or None,
                files=files or None,
            )
        return self._unwrap(response)

    # -- Internals -----------------------------------------------------------

    def _post_stream(self, path: str, body: dict[str, Any], stream: StreamCallback) -> None:
        with self._connection(streaming=True) as client:
            with client.stream(
                "POST",
                self._uri(path),
                headers=self._headers(),
                json=body,
            ) as response, JSONStream(stream.callback) as events:
                for chunk in response.iter_bytes():
                    events.feed(chunk, response)
                events.finish(response)

    def _connection(self, *, streaming: bool = False) -> httpx.Client:
        hooks: list[Any] = []
        if self.config.log_errors:
            hooks.append(log_error_response)
        # Streamed error bodies are raised chunk by chunk in JSONStream
        if not streaming:
            hooks.append(raise_for_status)

        client = httpx.Client(
            timeout=self.config.request_timeout,
            event_hooks={"response": hooks},
        )
        if self.config.client_config is not None:
            self.config.client_config(client)
        return client

    def _uri(self, path: str) -> str:
        url = build_url(self.config.uri_base, self.config.api_version, path)
        logger.debug("OpenRouter request: %s", url)
        return url

    def _headers(self) -> httpx.Headers:
        extra = httpx.Headers(self.config.extra_headers)
        headers = httpx.Headers(
            {
                "Content-Type": "application/json",
                "X-Title": _TITLE,
                "HTTP-Referer": _REFERER,
            }
        )
        # A configured Authorization header stands in for the access token
        if "Authorization" not in extra:
            headers["Authorization"] = f"Bearer {self.config.require_access_token()}"
        # Case-insensitive replace, so configured headers always win
        headers.update(extra)
        return headers

    @staticmethod
    def _multipart_parameters(
        parameters: Mapping[str, Any] | None,
    ) -> tuple[dict[str, Any], dict[str, Any]]:
        fields: dict[str, Any] = {}
        files: dict[str, Any] = {}
        for key, value in (parameters or {}).items():
            if isinstance(value, FileUpload):
                files[key] = value.as_httpx_file()
            else:
                fields[key] = value
        return fields, files

    @staticmethod
    def _unwrap(response: httpx.Response) -> Any:
        if "json" not in response.headers.get("content-type", ""):
            return response.text
        if not response.content.strip():
            return None
        return response.json()
