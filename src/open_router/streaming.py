"""Incremental SSE decoding for streamed chat completions.

OpenRouter streams completions as Server-Sent Events. Transport chunks do
not line up with events, so a :class:`JSONStream` keeps the partial line and
the partial event between chunks and hands every finished ``data`` payload,
JSON-decoded, to the caller's callback.
"""

from __future__ import annotations

import codecs
import json
from collections.abc import Callable, Iterator
from types import TracebackType
from typing import Any

import httpx
from httpx_sse import ServerSentEvent
from httpx_sse._decoders import SSEDecoder, SSELineDecoder

from open_router.errors import status_error, try_parse_json

DONE_SENTINEL = "[DONE]"


class JSONStream:
    """Per-call parser state feeding decoded SSE events to *callback*.

    Use as a context manager; the parser is released when the block exits,
    however it exits.
    """

    def __init__(self, callback: Callable[[Any], None]) -> None:
        self._callback = callback
        self._decoder: SSEDecoder | None = SSEDecoder()
        self._text = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._lines = SSELineDecoder()
        self.chunks_seen = 0

    def __enter__(self) -> JSONStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._decoder is None

    def close(self) -> None:
        self._decoder = None
        self._lines = SSELineDecoder()

    # -- Feeding -------------------------------------------------------------

    def feed(self, chunk: bytes, response: httpx.Response) -> None:
        """Consume one transport chunk of *response*.

        A non-200 response turns the chunk into the error body instead.
        """
        if self._decoder is None:
            raise RuntimeError("feed() called on a closed JSONStream")
        self.chunks_seen += 1

        if response.status_code != 200:
            raise status_error(response, try_parse_json(chunk))

        for event in self._events(self._decoder, chunk):
            if event.data == DONE_SENTINEL:
                continue
            self._callback(json.loads(event.data))

    def finish(self, response: httpx.Response) -> None:
        """Raise for a failed response that never delivered a chunk."""
        if self.chunks_seen == 0 and response.status_code != 200:
            raise status_error(response, "")

    def _events(self, decoder: SSEDecoder, chunk: bytes) -> Iterator[ServerSentEvent]:
        for line in self._lines.decode(self._text.decode(chunk)):
            event = decoder.decode(line)
            # id/retry-only blocks dispatch with no data; nothing to forward
            if event is not None and event.data:
                yield event
