"""Verification and parsing of inbound Sendly webhook payloads."""

from __future__ import annotations

import hashlib
import hmac
import json
from typing import Union

from pydantic import ValidationError as ModelValidationError

from .errors import WebhookSignatureError
from .models import WebhookEvent

SIGNATURE_PREFIX = "sha256="

Payload = Union[str, bytes]


def _as_bytes(value: Payload) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def generate_signature(payload: Payload, secret: str) -> str:
    digest = hmac.new(_as_bytes(secret), _as_bytes(payload), hashlib.sha256).hexdigest()
    return SIGNATURE_PREFIX + digest


def verify_signature(payload: Payload, signature: str, secret: str) -> bool:
    if not payload or not signature or not secret:
        return False
    expected = generate_signature(payload, secret)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))


def parse_event(payload: Payload, signature: str, secret: str) -> WebhookEvent:
    if not verify_signature(payload, signature, secret):
        raise WebhookSignatureError("Invalid webhook signature")
    try:
        document = json.loads(payload)
    except ValueError as exc:
        raise WebhookSignatureError(f"Failed to parse webhook payload: {exc}") from exc
    if not isinstance(document, dict):
        raise WebhookSignatureError("Invalid event structure")
    try:
        event = WebhookEvent.model_validate(document)
    except ModelValidationError as exc:
        raise WebhookSignatureError("Invalid event structure") from exc
    if not event.id or not event.type or not event.created_at:
        raise WebhookSignatureError("Invalid event structure")
    return event


__all__ = ["generate_signature", "parse_event", "verify_signature"]
