"""Tests for CLI commands."""

from __future__ import annotations

import respx
from httpx import Response
from rich.console import Console
from typer.testing import CliRunner

from open_router.cli import app

runner = CliRunner()

API = "https://openrouter.ai/api/v1"


class TestCLI:
    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "OpenRouter" in result.output

    def test_complete_command_help(self):
        result = runner.invoke(app, ["complete", "--help"])
        assert result.exit_code == 0

    def test_missing_token(self):
        result = runner.invoke(app, ["models"])
        assert result.exit_code == 1
        assert "OPENROUTER_API_KEY" in result.output

    @respx.mock
    def test_models(self, monkeypatch, model_listing):
        monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-test")
        monkeypatch.setattr("open_router.cli.console", Console(width=200))
        respx.get(f"{API}/models").mock(return_value=Response(200, json={"data": model_listing}))
        result = runner.invoke(app, ["models", "--limit", "1"])
        assert result.exit_code == 0
        assert "anthropic/claude-opus-4" in result.output
        assert "Showing 1 of 2 models" in result.output

    @respx.mock
    def test_complete(self, monkeypatch, completion):
        monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-test")
        respx.post(f"{API}/chat/completions").mock(return_value=Response(200, json=completion))
        result = runner.invoke(app, ["complete", "Hi", "--model", "openai/gpt-4.1-mini"])
        assert result.exit_code == 0
        assert "Hello!" in result.output
        assert "gen-123" in result.output

    @respx.mock
    def test_complete_stream(self, monkeypatch):
        monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-test")
        stream = (
            'data: {"choices": [{"delta": {"content": "Hel"}}]}\n\n'
            'data: {"choices": [{"delta": {"content": "lo"}}]}\n\n'
            "data: [DONE]\n\n"
        )
        respx.post(f"{API}/chat/completions").mock(
            return_value=Response(
                200, headers={"content-type": "text/event-stream"}, content=stream.encode()
            ),
        )
        result = runner.invoke(app, ["complete", "Hi", "--stream"])
        assert result.exit_code == 0
        assert "Hello" in result.output

    @respx.mock
    def test_http_error(self, monkeypatch):
        monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-test")
        respx.get(f"{API}/generation", params={"id": "gen-1"}).mock(
            return_value=Response(404, json={"error": {"message": "Not found"}}),
        )
        result = runner.invoke(app, ["stats", "gen-1"])
        assert result.exit_code == 1
        assert "HTTP 404" in result.output

    @respx.mock
    def test_stats(self, monkeypatch):
        monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-test")
        respx.get(f"{API}/generation", params={"id": "gen-1"}).mock(
            return_value=Response(200, json={"data": {"total_cost": 0.5}}),
        )
        result = runner.invoke(app, ["stats", "gen-1"])
        assert result.exit_code == 0
        assert "total_cost" in result.output
