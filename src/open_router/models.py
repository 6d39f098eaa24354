"""Request parameter variants and model catalog types."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import IO, Any

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# The ``stream`` parameter of a POST
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NoStream:
    """Leave ``stream`` out of the request body."""


@dataclass(frozen=True)
class StreamFlag:
    """Send ``stream`` as a plain boolean; the response is not parsed as SSE."""

    enabled: bool


@dataclass(frozen=True)
class StreamCallback:
    """Request an SSE response and hand every decoded event to *callback*."""

    callback: Callable[[Any], None]


StreamOption = NoStream | StreamFlag | StreamCallback

NO_STREAM = NoStream()


def stream_option(value: StreamOption | bool | None) -> StreamOption:
    """Normalize what callers put under ``parameters["stream"]``.

    Bare callables are rejected; wrap them in :class:`StreamCallback`.
    """
    if value is None:
        return NO_STREAM
    if isinstance(value, bool):
        return StreamFlag(value)
    if isinstance(value, (NoStream, StreamFlag, StreamCallback)):
        return value
    raise TypeError(
        f"stream must be a bool or a stream variant, not {type(value).__name__}"
    )


# ---------------------------------------------------------------------------
# Multipart file fields
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileUpload:
    """A multipart field sent as a file part.

    The MIME type is left empty on purpose; OpenRouter infers it.
    """

    file: IO[bytes]

    @property
    def filename(self) -> str:
        return os.path.basename(getattr(self.file, "name", "") or "")

    @property
    def content_type(self) -> str:
        return ""

    def as_httpx_file(self) -> tuple[str, IO[bytes], str]:
        return (self.filename, self.file, self.content_type)


# ---------------------------------------------------------------------------
# Model catalog
# ---------------------------------------------------------------------------


class ModelTier(str, Enum):
    """Model price tier."""

    FLAGSHIP = "flagship"
    MID = "mid"
    BUDGET = "budget"


class ModelInfo(BaseModel):
    """Metadata and pricing for a single model listed by OpenRouter."""

    id: str = Field(description="Model identifier, e.g. 'openai/gpt-4.1-mini'")
    name: str = Field(default="", description="Human-readable model name")
    provider: str = Field(default="", description="Provider prefix, e.g. 'openai'")
    input_price: float = Field(default=0.0, description="Cost per million input tokens (USD)")
    output_price: float = Field(default=0.0, description="Cost per million output tokens (USD)")
    context_window: int = Field(default=4096, description="Maximum context length in tokens")
    vision: bool = Field(default=False, description="Accepts image input")
    tier: ModelTier = Field(default=ModelTier.BUDGET, description="Price tier")

    def estimate_cost(self, input_tokens: int, output_tokens: int) -> float:
        """Estimate cost in USD for a given token count."""
        return (self.input_price * input_tokens + self.output_price * output_tokens) / 1_000_000


def _infer_tier_from_price(input_price: float) -> ModelTier:
    """Tier from input price per million tokens."""
    if input_price >= 5.0:
        return ModelTier.FLAGSHIP
    if input_price >= 0.5:
        return ModelTier.MID
    return ModelTier.BUDGET


def _has_vision(api_data: dict[str, Any]) -> bool:
    """Check if the model supports image input based on OpenRouter modality."""
    modality = api_data.get("architecture", {}).get("modality", "")
    return "image" in modality.lower()


def _per_million(pricing: dict[str, Any], key: str) -> float:
    # OpenRouter returns prices as strings in $/token
    try:
        return float(pricing.get(key, 0)) * 1_000_000
    except (ValueError, TypeError):
        return 0.0


def parse_model(data: dict[str, Any]) -> ModelInfo:
    """Parse one entry of the ``/models`` listing into ModelInfo."""
    model_id = data.get("id", "")
    pricing = data.get("pricing") or {}
    input_price = _per_million(pricing, "prompt")

    return ModelInfo(
        id=model_id,
        name=data.get("name", model_id),
        provider=model_id.split("/")[0] if "/" in model_id else "",
        input_price=input_price,
        output_price=_per_million(pricing, "completion"),
        context_window=data.get("context_length") or 4096,
        vision=_has_vision(data),
        tier=_infer_tier_from_price(input_price),
    )
