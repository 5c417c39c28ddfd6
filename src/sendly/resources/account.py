"""Account resource: profile, credits, transactions, and API keys."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..models import (
    Account,
    ApiKey,
    ApiKeyList,
    CreateApiKeyRequest,
    CreatedApiKey,
    CreditTransactionList,
    Credits,
)
from ..transport import quote_path_segment
from ..validation import cap_limit, require_id
from .base import Resource, parse_list, parse_model


class AccountResource(Resource):
    async def get(self) -> Account:
        document = await self._client.get("/account")
        return parse_model(Account, document, "account", "data")

    async def get_credits(self) -> Credits:
        document = await self._client.get("/account/credits")
        return parse_model(Credits, document, "credits", "data")

    async def list_transactions(
        self,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        type: Optional[str] = None,
    ) -> CreditTransactionList:
        params: Dict[str, Any] = {"limit": cap_limit(limit), "offset": offset, "type": type}
        document = await self._client.get("/account/transactions", params)
        return parse_list(CreditTransactionList, document)

    async def list_api_keys(self) -> ApiKeyList:
        document = await self._client.get("/account/api-keys")
        return parse_list(ApiKeyList, document)

    async def create_api_key(self, name: str, *, expires_at: Optional[str] = None) -> CreatedApiKey:
        require_id(name, "API key name")
        request = CreateApiKeyRequest(name=name, expires_at=expires_at)
        document = await self._client.post("/account/api-keys", request)
        if not isinstance(document, dict):
            return CreatedApiKey()
        api_key = document.get("api_key")
        return CreatedApiKey(
            api_key=parse_model(ApiKey, api_key) if isinstance(api_key, dict) else ApiKey(),
            key=document.get("key") or "",
        )

    async def revoke_api_key(self, key_id: str) -> None:
        require_id(key_id, "API key ID")
        await self._client.delete(f"/account/api-keys/{quote_path_segment(key_id)}")


__all__ = ["AccountResource"]
