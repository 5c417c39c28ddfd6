from __future__ import annotations

import json
from typing import List

import httpx
import pytest

from sendly import AuthenticationError, InsufficientCreditsError, ValidationError


@pytest.mark.asyncio
async def test_get_account_unwraps_account_key(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "account": {
                    "id": "acct_1",
                    "email": "ops@example.com",
                    "verification": {"email_verified": True, "phone_verified": True, "identity_verified": True},
                    "limits": {"max_batch_size": 500},
                }
            },
        )

    client = make_client(handler)
    account = await client.account.get()
    await client.aclose()

    assert account.id == "acct_1"
    assert account.verification.is_fully_verified
    assert account.limits.max_batch_size == 500
    assert account.limits.messages_per_second == 10


@pytest.mark.asyncio
async def test_transactions(make_client) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={"transactions": [{"id": "tx_1", "amount": -3}, {"id": "tx_2", "amount": 100}], "total": 2},
        )

    client = make_client(handler)
    transactions = await client.account.list_transactions(limit=250, type="usage")
    await client.aclose()

    assert transactions.first.is_debit
    assert transactions.last.is_credit
    assert seen[0].url.params["limit"] == "100"
    assert seen[0].url.params["type"] == "usage"


@pytest.mark.asyncio
async def test_api_keys_lifecycle(make_client) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.method == "POST":
            return httpx.Response(201, json={"api_key": {"id": "key_1", "name": "ci"}, "key": "sk_live_secret"})
        if request.method == "DELETE":
            return httpx.Response(204)
        return httpx.Response(200, json={"data": [{"id": "key_1", "expires_at": "2000-01-01T00:00:00Z"}]})

    client = make_client(handler)
    created = await client.account.create_api_key("ci")
    keys = await client.account.list_api_keys()
    await client.account.revoke_api_key("key_1")
    await client.aclose()

    assert created.api_key.id == "key_1"
    assert created.key == "sk_live_secret"
    assert json.loads(seen[0].content) == {"name": "ci"}
    assert keys[0].is_expired
    assert seen[2].url.path == "/api/v1/account/api-keys/key_1"


@pytest.mark.asyncio
async def test_create_api_key_requires_name(make_client) -> None:
    client = make_client(lambda request: httpx.Response(200, json={}))
    with pytest.raises(ValidationError):
        await client.account.create_api_key("")
    await client.aclose()


@pytest.mark.asyncio
async def test_remote_auth_and_credit_failures_are_typed(make_client) -> None:
    responses = [
        httpx.Response(401, json={"message": "Invalid API key"}),
        httpx.Response(402, json={"error": "Not enough credits"}),
    ]

    def handler(request: httpx.Request) -> httpx.Response:
        return responses.pop(0)

    client = make_client(handler)
    with pytest.raises(AuthenticationError) as auth:
        await client.account.get()
    with pytest.raises(InsufficientCreditsError) as credits:
        await client.messages.send("+15551234567", "Hello")
    await client.aclose()

    assert auth.value.status_code == 401
    assert credits.value.message == "Not enough credits"
    assert credits.value.retryable is False
