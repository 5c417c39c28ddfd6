"""Structured attempt logging for the request engine."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .errors import SendlyError
from .transport import OutboundRequest

logger = logging.getLogger("sendly.retry")


def build_attempt_log(
    request: Optional[OutboundRequest],
    attempt: int,
    max_attempts: int,
    error: Optional[SendlyError] = None,
    delay: Optional[float] = None,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "method": request.method if request else None,
        "path": request.path if request else None,
        "attempt": attempt + 1,
        "max_attempts": max_attempts,
    }
    if error is not None:
        payload["error"] = {
            "kind": error.kind.value,
            "status_code": error.status_code,
            "error_code": error.error_code,
            "message": error.message,
        }
    if delay is not None:
        payload["delay_s"] = delay
    return payload


def log_attempt(payload: Dict[str, Any], level: int = logging.WARNING) -> None:
    logger.log(level, json.dumps(payload, separators=(",", ":")))


__all__ = ["build_attempt_log", "log_attempt"]
