"""Async Python client for the Sendly SMS API."""

from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx

from .classifier import Document, ensure_success, parse_success
from .config import DEFAULT_BASE_URL, DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT, ClientConfig
from .resources import AccountResource, MessagesResource, WebhooksResource
from .retry import RetryController, SleepFunc
from .transport import HttpTransport, OutboundRequest


class SendlyClient:
    """Entry point for the Sendly API.

    Use as an async context manager, or call :meth:`aclose` when done::

        async with SendlyClient("sk_live_...") as client:
            message = await client.messages.send("+15551234567", "Hello")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Optional[SleepFunc] = None,
    ) -> None:
        if config is None:
            config = ClientConfig(api_key=api_key or "", base_url=base_url, timeout=timeout, max_retries=max_retries)
        self._config = config
        self._transport = HttpTransport(config, transport=transport)
        self._retry = RetryController(config.max_retries, sleep=sleep)

        self.messages = MessagesResource(self)
        self.webhooks = WebhooksResource(self)
        self.account = AccountResource(self)

    async def __aenter__(self) -> "SendlyClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def request(self, request: OutboundRequest) -> Document:
        async def attempt() -> httpx.Response:
            return ensure_success(await self._transport.send(request))

        response = await self._retry.execute(attempt, request)
        # decoded outside the retry loop: the server already accepted the call
        return parse_success(response.text, response.status_code)

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Document:
        return await self.request(OutboundRequest("GET", path, params=params))

    async def post(self, path: str, body: Any = None) -> Document:
        return await self.request(OutboundRequest("POST", path, body=body if body is not None else {}))

    async def patch(self, path: str, body: Any = None) -> Document:
        return await self.request(OutboundRequest("PATCH", path, body=body if body is not None else {}))

    async def delete(self, path: str) -> Document:
        return await self.request(OutboundRequest("DELETE", path))

    async def aclose(self) -> None:
        await self._transport.close()


__all__ = ["SendlyClient"]
