"""Configuration loading from environment variables and config files."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import yaml
from pydantic import BaseModel, ConfigDict, Field

from open_router.errors import MissingAccessTokenError

_DEFAULT_CONFIG_PATH = Path.home() / ".config" / "open_router" / "config.yaml"


class Configuration(BaseModel):
    """Client configuration, read on every request and never mutated."""

    model_config = ConfigDict(frozen=True)

    access_token: str = Field(default="", description="OpenRouter API key")
    uri_base: str = Field(
        default="https://openrouter.ai/api",
        description="OpenRouter API base URL, without the version segment",
    )
    api_version: str = Field(default="v1")
    request_timeout: float = Field(default=120.0, description="Per-request timeout in seconds")
    extra_headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers sent with every request; they win over the built-in ones",
    )
    log_errors: bool = Field(default=False, description="Log the body of every error response")
    client_config: Callable[[httpx.Client], None] | None = Field(
        default=None,
        description="Called with each freshly built httpx.Client to customize it",
        exclude=True,
    )

    def require_access_token(self) -> str:
        """Return the access token or raise MissingAccessTokenError."""
        if not self.access_token:
            raise MissingAccessTokenError
        return self.access_token


def _truthy(value: str) -> bool:
    return value.lower() in ("1", "true", "yes")


def load_configuration(config_path: Path | None = None, **overrides: Any) -> Configuration:
    """Load configuration from a YAML file, then overlay env vars and *overrides*."""
    env_values: dict[str, Any] = {}

    env_map = {
        "OPENROUTER_API_KEY": "access_token",
        "OPENROUTER_ACCESS_TOKEN": "access_token",
        "OPENROUTER_URI_BASE": "uri_base",
        "OPENROUTER_API_VERSION": "api_version",
        "OPENROUTER_REQUEST_TIMEOUT": "request_timeout",
    }

    for env_var, field_name in env_map.items():
        val = os.environ.get(env_var)
        if val is not None:
            env_values[field_name] = val

    log_errors = os.environ.get("OPENROUTER_LOG_ERRORS")
    if log_errors is not None:
        env_values["log_errors"] = _truthy(log_errors)

    # Config file has the lowest priority
    path = config_path or _DEFAULT_CONFIG_PATH
    file_values: dict[str, Any] = {}
    if path.exists():
        with open(path) as f:
            data = yaml.safe_load(f)
            if isinstance(data, dict):
                file_values = data

    merged = {**file_values, **env_values, **overrides}
    return Configuration(**merged)
