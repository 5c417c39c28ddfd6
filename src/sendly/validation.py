"""Local argument checks run before any request leaves the client."""

from __future__ import annotations

import re
from typing import Any, Optional, Sized

from .errors import ValidationError

PHONE_RE = re.compile(r"^\+[1-9]\d{1,14}$")
SCHEDULED_AT_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}")

MAX_TEXT_LENGTH = 1600
MAX_PAGE_SIZE = 100


def validate_phone(phone: Any) -> None:
    if not isinstance(phone, str) or not PHONE_RE.fullmatch(phone):
        raise ValidationError("Invalid phone number format. Use E.164 format (e.g., +15551234567)")


def validate_text(text: Any) -> None:
    if not isinstance(text, str) or not text:
        raise ValidationError("Message text is required")
    if len(text) > MAX_TEXT_LENGTH:
        raise ValidationError(f"Message text exceeds maximum length ({MAX_TEXT_LENGTH} characters)")


def validate_scheduled_at(scheduled_at: Any) -> None:
    if not isinstance(scheduled_at, str) or not scheduled_at:
        raise ValidationError("Scheduled time is required")
    if not SCHEDULED_AT_RE.match(scheduled_at):
        raise ValidationError("Invalid scheduled time format. Use ISO 8601 format (e.g., 2025-01-20T10:00:00Z)")


def require_id(value: Any, label: str) -> str:
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{label} is required")
    return value


def require_items(items: Any, message: str) -> None:
    if not isinstance(items, Sized) or len(items) == 0:
        raise ValidationError(message)


def cap_limit(limit: Optional[int]) -> Optional[int]:
    if limit is None:
        return None
    return min(int(limit), MAX_PAGE_SIZE)


__all__ = [
    "MAX_PAGE_SIZE",
    "MAX_TEXT_LENGTH",
    "PHONE_RE",
    "cap_limit",
    "require_id",
    "require_items",
    "validate_phone",
    "validate_scheduled_at",
    "validate_text",
]
