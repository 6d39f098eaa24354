"""OpenRouter client: chat completions, model listing and generation stats."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from open_router.errors import ServerError
from open_router.http import HTTPClient
from open_router.models import ModelInfo, StreamCallback, parse_model

DEFAULT_MODEL = "openrouter/auto"


class OpenRouterClient(HTTPClient):
    """High-level OpenRouter API client."""

    def complete(
        self,
        messages: list[dict[str, Any]],
        *,
        model: str | Sequence[str] = DEFAULT_MODEL,
        providers: Sequence[str] | None = None,
        transforms: Sequence[str] | None = None,
        extras: dict[str, Any] | None = None,
        stream: Callable[[Any], None] | None = None,
    ) -> dict[str, Any] | None:
        """Request a chat completion.

        A list of models is sent as a fallback route. When *stream* is given,
        every streamed chunk is passed to it and ``None`` is returned.
        """
        parameters: dict[str, Any] = {"messages": messages}
        if isinstance(model, str):
            parameters["model"] = model
        else:
            parameters["models"] = list(model)
            parameters["route"] = "fallback"
        if providers:
            parameters["provider"] = {"order": list(providers)}
        if transforms:
            parameters["transforms"] = list(transforms)
        if stream is not None:
            parameters["stream"] = StreamCallback(stream)
        parameters.update(extras or {})

        response = self.post("/chat/completions", parameters)

        if isinstance(response, dict):
            error = response.get("error")
            message = error.get("message") if isinstance(error, dict) else error
            if message:
                raise ServerError(message)
            return response
        if stream is None:
            if not response:
                raise ServerError(
                    "Empty response from OpenRouter. Might be worth retrying once or twice."
                )
            raise ServerError(f"Unexpected response from OpenRouter: {response!r}")
        return None

    def models(self) -> list[dict[str, Any]]:
        """Raw entries of the ``/models`` listing."""
        data: list[dict[str, Any]] = self.get("/models")["data"]
        return data

    def list_models(self) -> list[ModelInfo]:
        return [parse_model(entry) for entry in self.models()]

    def query_generation_stats(self, generation_id: str) -> dict[str, Any]:
        """Token counts, cost and latency of a finished generation."""
        data: dict[str, Any] = self.get(f"/generation?id={generation_id}")["data"]
        return data
