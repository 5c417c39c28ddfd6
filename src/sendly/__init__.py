"""Sendly Python SDK."""

from .client import SendlyClient
from .config import ClientConfig
from .errors import (
    AuthenticationError,
    ErrorKind,
    InsufficientCreditsError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    SendlyError,
    ValidationError,
    WebhookSignatureError,
)
from .pagination import AsyncPager
from .signatures import generate_signature, parse_event, verify_signature
from .version import __version__

__all__ = [
    "AsyncPager",
    "AuthenticationError",
    "ClientConfig",
    "ErrorKind",
    "InsufficientCreditsError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "SendlyClient",
    "SendlyError",
    "ValidationError",
    "WebhookSignatureError",
    "__version__",
    "generate_signature",
    "parse_event",
    "verify_signature",
]
