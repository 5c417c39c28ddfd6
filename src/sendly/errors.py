"""Error taxonomy raised by the Sendly client.

Every failure surfaced to callers is a :class:`SendlyError`. The ``kind``
attribute is the discriminant; each subclass is pinned to exactly one kind, so
callers can either branch on ``err.kind`` or catch the subclass.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Optional


class ErrorKind(str, Enum):
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INSUFFICIENT_CREDITS = "insufficient_credits"
    RATE_LIMIT = "rate_limit"
    NETWORK = "network"
    GENERIC = "generic"


RETRYABLE_KINDS = frozenset({ErrorKind.RATE_LIMIT, ErrorKind.NETWORK, ErrorKind.GENERIC})


class SendlyError(Exception):
    """Base error; raised directly for the generic kind."""

    kind: ClassVar[ErrorKind] = ErrorKind.GENERIC
    default_message: ClassVar[str] = "Request failed"
    default_status: ClassVar[int] = 0
    default_code: ClassVar[Optional[str]] = None

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
    ) -> None:
        self.message = message if message is not None else self.default_message
        self.status_code = status_code if status_code is not None else self.default_status
        self.error_code = error_code if error_code is not None else self.default_code
        super().__init__(self.message)

    @property
    def retryable(self) -> bool:
        return self.kind in RETRYABLE_KINDS

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r}, "
            f"status_code={self.status_code}, error_code={self.error_code!r})"
        )


class AuthenticationError(SendlyError):
    kind = ErrorKind.AUTHENTICATION
    default_message = "Invalid or missing API key"
    default_status = 401
    default_code = "AUTHENTICATION_ERROR"


class ValidationError(SendlyError):
    kind = ErrorKind.VALIDATION
    default_message = "Validation failed"
    default_status = 400
    default_code = "VALIDATION_ERROR"


class NotFoundError(SendlyError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found"
    default_status = 404
    default_code = "NOT_FOUND"


class InsufficientCreditsError(SendlyError):
    kind = ErrorKind.INSUFFICIENT_CREDITS
    default_message = "Insufficient credits"
    default_status = 402
    default_code = "INSUFFICIENT_CREDITS"


class RateLimitError(SendlyError):
    kind = ErrorKind.RATE_LIMIT
    default_message = "Rate limit exceeded"
    default_status = 429
    default_code = "RATE_LIMIT_EXCEEDED"

    def __init__(self, message: Optional[str] = None, retry_after: Optional[float] = None) -> None:
        super().__init__(message)
        if retry_after is not None and retry_after < 0:
            raise ValueError("retry_after must be non-negative")
        # seconds to wait before the next attempt, from the Retry-After header
        self.retry_after = retry_after


class NetworkError(SendlyError):
    kind = ErrorKind.NETWORK
    default_message = "Network error occurred"
    default_status = 0
    default_code = "NETWORK_ERROR"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message)


class WebhookSignatureError(Exception):
    """Raised when an inbound webhook payload fails verification or parsing."""

    def __init__(self, message: str = "Invalid webhook signature") -> None:
        self.message = message
        super().__init__(message)


__all__ = [
    "AuthenticationError",
    "ErrorKind",
    "InsufficientCreditsError",
    "NetworkError",
    "NotFoundError",
    "RETRYABLE_KINDS",
    "RateLimitError",
    "SendlyError",
    "ValidationError",
    "WebhookSignatureError",
]
