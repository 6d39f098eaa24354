"""Shared test fixtures and mock data."""

from __future__ import annotations

from typing import Any

import pytest

from open_router.client import OpenRouterClient
from open_router.config import Configuration


@pytest.fixture
def completion() -> dict[str, Any]:
    """A non-streamed chat completion as OpenRouter returns it."""
    return {
        "id": "gen-123",
        "object": "chat.completion",
        "model": "openai/gpt-4.1-mini",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": "Hello!"},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 5, "completion_tokens": 3, "total_tokens": 8},
    }


@pytest.fixture
def model_listing() -> list[dict[str, Any]]:
    """Two entries of the ``/models`` listing."""
    return [
        {
            "id": "openai/gpt-4.1-mini",
            "name": "GPT-4.1 Mini",
            "pricing": {"prompt": "0.0000004", "completion": "0.0000016"},
            "context_length": 1000000,
            "architecture": {"modality": "text+image->text"},
        },
        {
            "id": "anthropic/claude-opus-4",
            "name": "Claude Opus 4",
            "pricing": {"prompt": "0.000015", "completion": "0.000075"},
            "context_length": 200000,
            "architecture": {"modality": "text->text"},
        },
    ]


@pytest.fixture
def config() -> Configuration:
    return Configuration(access_token="sk-or-test")


@pytest.fixture
def client(config: Configuration) -> OpenRouterClient:
    return OpenRouterClient(config)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Keep the developer's environment and config file out of tests."""
    for var in (
        "OPENROUTER_API_KEY",
        "OPENROUTER_ACCESS_TOKEN",
        "OPENROUTER_URI_BASE",
        "OPENROUTER_API_VERSION",
        "OPENROUTER_REQUEST_TIMEOUT",
        "OPENROUTER_LOG_ERRORS",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(
        "open_router.config._DEFAULT_CONFIG_PATH", tmp_path / "missing" / "config.yaml"
    )
