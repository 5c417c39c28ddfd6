"""Configuration objects for the Sendly Python SDK."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .errors import AuthenticationError
from .version import __version__

DEFAULT_BASE_URL = "https://sendly.live/api/v1"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    user_agent: str = f"sendly-python/{__version__}"
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.api_key:
            raise AuthenticationError("API key is required")
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def default_headers(self) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
        headers.update(self.headers)
        return headers

    @classmethod
    def from_env(cls, api_key: Optional[str] = None) -> "ClientConfig":
        key = api_key or os.environ.get("SENDLY_API_KEY", "")
        base_url = os.environ.get("SENDLY_BASE_URL") or DEFAULT_BASE_URL
        timeout = float(os.environ.get("SENDLY_TIMEOUT", str(DEFAULT_TIMEOUT)))
        max_retries = int(os.environ.get("SENDLY_MAX_RETRIES", str(DEFAULT_MAX_RETRIES)))
        return cls(api_key=key, base_url=base_url, timeout=timeout, max_retries=max_retries)


__all__ = ["ClientConfig", "DEFAULT_BASE_URL", "DEFAULT_MAX_RETRIES", "DEFAULT_TIMEOUT"]
