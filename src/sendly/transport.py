"""HTTP transport: one round trip per call against the Sendly API."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from .config import ClientConfig
from .errors import NetworkError

logger = logging.getLogger("sendly.http")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def quote_path_segment(value: str) -> str:
    return quote(value, safe="")


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Optional[Mapping[str, Any]]) -> str:
    if not params:
        return ""
    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        rendered = _query_value(value)
        if not rendered:
            continue
        pairs.append(f"{quote(str(key), safe='')}={quote(rendered, safe='')}")
    return "&".join(pairs)


def _snake_keys(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {to_snake_case(str(k)): _snake_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_snake_keys(item) for item in value]
    return value


def serialize_body(body: Any) -> Any:
    """Render a request body as JSON-ready data with snake_case keys.

    Pydantic models are dumped by alias; keys listed in the model's
    ``omit_when_none`` set are dropped when their value is None.
    """
    if isinstance(body, BaseModel):
        data = body.model_dump(mode="json", by_alias=True)
        omitted = getattr(body, "omit_when_none", frozenset())
        data = {k: v for k, v in data.items() if not (k in omitted and v is None)}
        return _snake_keys(data)
    return _snake_keys(body)


@dataclass(frozen=True)
class OutboundRequest:
    method: str
    path: str
    params: Optional[Mapping[str, Any]] = None
    body: Any = None

    def url(self) -> str:
        query = build_query(self.params)
        return f"{self.path}?{query}" if query else self.path

    def content(self) -> Optional[str]:
        if self.body is None:
            return None
        return json.dumps(serialize_body(self.body), separators=(",", ":"))


class HttpTransport:
    def __init__(self, config: ClientConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout,
            headers=config.default_headers(),
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def send(self, request: OutboundRequest) -> httpx.Response:
        logger.debug("request method=%s path=%s", request.method, request.path)
        try:
            response = await self._client.request(request.method, request.url(), content=request.content())
        except httpx.TimeoutException as exc:
            raise NetworkError("Request timed out") from exc
        except httpx.RequestError as exc:
            raise NetworkError(f"Request failed: {exc}") from exc
        logger.debug("response method=%s path=%s status=%s", request.method, request.path, response.status_code)
        return response

    async def close(self) -> None:
        await self._client.aclose()


__all__ = [
    "HttpTransport",
    "OutboundRequest",
    "build_query",
    "quote_path_segment",
    "serialize_body",
    "to_snake_case",
]
