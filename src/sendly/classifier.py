"""Turns completed HTTP responses into documents or typed errors."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx

from .errors import (
    AuthenticationError,
    InsufficientCreditsError,
    NotFoundError,
    RateLimitError,
    SendlyError,
    ValidationError,
)

Document = Union[Dict[str, Any], List[Any]]

UNKNOWN_ERROR = "Unknown error"


def parse_success(text: str, status_code: int = 200) -> Document:
    if not text or not text.strip():
        return {}
    try:
        return json.loads(text)
    except ValueError as exc:
        raise SendlyError("Invalid JSON in response body", status_code=status_code) from exc


def _message_from(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    # {"error": {"message": "..."}}
    if isinstance(value, dict) and isinstance(value.get("message"), str):
        return value["message"]
    return None


def extract_error_message(text: str) -> str:
    try:
        document = json.loads(text)
    except ValueError:
        return text or UNKNOWN_ERROR
    if isinstance(document, dict):
        for key in ("message", "error"):
            if key in document:
                message = _message_from(document[key])
                if message is not None:
                    return message
    return UNKNOWN_ERROR


def parse_retry_after(headers: Mapping[str, str]) -> Optional[float]:
    raw = headers.get("Retry-After")
    if raw is None:
        return None
    try:
        seconds = int(raw.strip())
    except ValueError:
        return None
    if seconds < 0:
        return None
    return float(seconds)


def error_from_response(status_code: int, text: str, headers: Mapping[str, str]) -> SendlyError:
    message = extract_error_message(text)
    if status_code == 401:
        return AuthenticationError(message)
    if status_code == 402:
        return InsufficientCreditsError(message)
    if status_code == 404:
        return NotFoundError(message)
    if status_code == 429:
        return RateLimitError(message, retry_after=parse_retry_after(headers))
    if status_code in (400, 422):
        return ValidationError(message, status_code=status_code)
    return SendlyError(message, status_code=status_code)


def ensure_success(response: httpx.Response) -> httpx.Response:
    """Return a 2xx response untouched; raise the classified error otherwise."""
    if 200 <= response.status_code < 300:
        return response
    raise error_from_response(response.status_code, response.text, response.headers)


def classify(response: httpx.Response) -> Document:
    ensure_success(response)
    return parse_success(response.text, response.status_code)


__all__ = [
    "Document",
    "classify",
    "ensure_success",
    "error_from_response",
    "extract_error_message",
    "parse_retry_after",
    "parse_success",
]
