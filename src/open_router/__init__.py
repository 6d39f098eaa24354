"""open_router: a thin HTTP client for the OpenRouter API."""

from importlib.metadata import version

from open_router.client import OpenRouterClient
from open_router.config import Configuration, load_configuration
from open_router.errors import (
    MissingAccessTokenError,
    OpenRouterError,
    OpenRouterHTTPError,
    ServerError,
)
from open_router.http import HTTPClient
from open_router.models import (
    NO_STREAM,
    FileUpload,
    ModelInfo,
    NoStream,
    StreamCallback,
    StreamFlag,
)
from open_router.streaming import JSONStream

__version__ = version("open-router-client")
__all__ = [
    "NO_STREAM",
    "Configuration",
    "FileUpload",
    "HTTPClient",
    "JSONStream",
    "MissingAccessTokenError",
    "ModelInfo",
    "NoStream",
    "OpenRouterClient",
    "OpenRouterError",
    "OpenRouterHTTPError",
    "ServerError",
    "StreamCallback",
    "StreamFlag",
    "__version__",
    "load_configuration",
]
