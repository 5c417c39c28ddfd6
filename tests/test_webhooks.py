from __future__ import annotations

import json
from typing import List

import httpx
import pytest

from sendly import ValidationError


@pytest.mark.asyncio
async def test_create_webhook_returns_secret(make_client) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            201,
            json={"webhook": {"id": "wh_1", "url": "https://example.com/hook", "events": ["message.delivered"]}, "secret": "whsec_1"},
        )

    client = make_client(handler)
    created = await client.webhooks.create("https://example.com/hook", ["message.delivered"])
    await client.aclose()

    assert created.webhook.id == "wh_1"
    assert created.webhook.is_healthy
    assert created.secret == "whsec_1"
    assert json.loads(seen[0].content) == {"url": "https://example.com/hook", "events": ["message.delivered"]}


@pytest.mark.asyncio
async def test_create_webhook_validates_locally(make_client) -> None:
    client = make_client(lambda request: httpx.Response(200, json={}))
    with pytest.raises(ValidationError):
        await client.webhooks.create("", ["message.sent"])
    with pytest.raises(ValidationError):
        await client.webhooks.create("https://example.com/hook", [])
    await client.aclose()


@pytest.mark.asyncio
async def test_list_webhooks_accepts_bare_array(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"id": "wh_1"}, {"id": "wh_2", "circuit_state": "open"}])

    client = make_client(handler)
    webhooks = await client.webhooks.list()
    await client.aclose()

    assert [w.id for w in webhooks] == ["wh_1", "wh_2"]
    assert webhooks.total == 2
    assert webhooks[1].is_circuit_open


@pytest.mark.asyncio
async def test_update_uses_patch_with_partial_body(make_client) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": {"id": "wh_1", "is_active": False}})

    client = make_client(handler)
    webhook = await client.webhooks.update("wh_1", is_active=False)
    await client.aclose()

    assert webhook.is_active is False
    assert seen[0].method == "PATCH"
    assert seen[0].url.path == "/api/v1/webhooks/wh_1"
    assert json.loads(seen[0].content) == {"is_active": False}


@pytest.mark.asyncio
async def test_test_and_rotate_secret(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert json.loads(request.content) == {}
        if request.url.path.endswith("/test"):
            return httpx.Response(200, json={"success": True, "status_code": 200, "response_time_ms": 85})
        return httpx.Response(200, json={"secret": "whsec_new", "rotated_at": "2025-01-20T10:00:00Z"})

    client = make_client(handler)
    result = await client.webhooks.test("wh_1")
    rotation = await client.webhooks.rotate_secret("wh_1")
    await client.aclose()

    assert result.success and result.response_time_ms == 85
    assert rotation.secret == "whsec_new"


@pytest.mark.asyncio
async def test_deliveries(make_client) -> None:
    paths: List[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        if request.url.path.endswith("/deliveries"):
            return httpx.Response(
                200,
                json={"deliveries": [{"id": "del_1", "http_status": 500}], "total": 9, "has_more": True},
            )
        return httpx.Response(200, json={"delivery": {"id": "del_1", "attempt_number": 2, "success": True}})

    client = make_client(handler)
    deliveries = await client.webhooks.list_deliveries("wh_1", limit=10)
    delivery = await client.webhooks.get_delivery("wh_1", "del_1")
    retried = await client.webhooks.retry_delivery("wh_1", "del_1")
    await client.aclose()

    assert deliveries.total == 9 and deliveries.has_more
    assert deliveries.first.http_status == 500
    assert delivery.attempt_number == 2
    assert retried.success
    assert paths == [
        "/api/v1/webhooks/wh_1/deliveries",
        "/api/v1/webhooks/wh_1/deliveries/del_1",
        "/api/v1/webhooks/wh_1/deliveries/del_1/retry",
    ]


@pytest.mark.asyncio
async def test_delete_and_missing_ids(make_client) -> None:
    methods: List[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        methods.append(request.method)
        return httpx.Response(204)

    client = make_client(handler)
    await client.webhooks.delete("wh_1")
    with pytest.raises(ValidationError):
        await client.webhooks.get("")
    with pytest.raises(ValidationError):
        await client.webhooks.get_delivery("wh_1", "")
    await client.aclose()

    assert methods == ["DELETE"]
