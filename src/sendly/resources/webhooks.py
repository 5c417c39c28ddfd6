"""Webhooks resource: manage endpoints and inspect deliveries."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..errors import ValidationError
from ..models import (
    CreateWebhookRequest,
    UpdateWebhookRequest,
    Webhook,
    WebhookCreated,
    WebhookDelivery,
    WebhookDeliveryList,
    WebhookList,
    WebhookSecretRotation,
    WebhookTestResult,
)
from ..transport import quote_path_segment
from ..validation import cap_limit, require_id, require_items
from .base import Resource, parse_list, parse_model


def _webhook_path(webhook_id: str) -> str:
    return f"/webhooks/{quote_path_segment(require_id(webhook_id, 'Webhook ID'))}"


def _delivery_path(webhook_id: str, delivery_id: str) -> str:
    base = _webhook_path(webhook_id)
    return f"{base}/deliveries/{quote_path_segment(require_id(delivery_id, 'Delivery ID'))}"


class WebhooksResource(Resource):
    async def create(
        self,
        url: str,
        events: List[str],
        *,
        mode: Optional[str] = None,
        api_version: Optional[str] = None,
    ) -> WebhookCreated:
        if not url:
            raise ValidationError("Webhook URL is required")
        require_items(events, "At least one event type is required")
        request = CreateWebhookRequest(url=url, events=list(events), mode=mode, api_version=api_version)
        document = await self._client.post("/webhooks", request)
        secret = document.get("secret", "") if isinstance(document, dict) else ""
        return WebhookCreated(
            webhook=parse_model(Webhook, document, "webhook"),
            secret=secret or "",
        )

    async def list(self) -> WebhookList:
        document = await self._client.get("/webhooks")
        return parse_list(WebhookList, document)

    async def get(self, webhook_id: str) -> Webhook:
        document = await self._client.get(_webhook_path(webhook_id))
        return parse_model(Webhook, document, "webhook", "data")

    async def update(
        self,
        webhook_id: str,
        *,
        url: Optional[str] = None,
        events: Optional[List[str]] = None,
        is_active: Optional[bool] = None,
        mode: Optional[str] = None,
    ) -> Webhook:
        path = _webhook_path(webhook_id)
        request = UpdateWebhookRequest(url=url, events=events, is_active=is_active, mode=mode)
        document = await self._client.patch(path, request)
        return parse_model(Webhook, document, "webhook", "data")

    async def delete(self, webhook_id: str) -> None:
        await self._client.delete(_webhook_path(webhook_id))

    async def test(self, webhook_id: str) -> WebhookTestResult:
        document = await self._client.post(f"{_webhook_path(webhook_id)}/test", {})
        return parse_model(WebhookTestResult, document)

    async def rotate_secret(self, webhook_id: str) -> WebhookSecretRotation:
        document = await self._client.post(f"{_webhook_path(webhook_id)}/rotate-secret", {})
        return parse_model(WebhookSecretRotation, document)

    async def list_deliveries(
        self,
        webhook_id: str,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> WebhookDeliveryList:
        path = f"{_webhook_path(webhook_id)}/deliveries"
        params: Dict[str, Any] = {"limit": cap_limit(limit), "offset": offset}
        document = await self._client.get(path, params)
        return parse_list(WebhookDeliveryList, document)

    async def get_delivery(self, webhook_id: str, delivery_id: str) -> WebhookDelivery:
        document = await self._client.get(_delivery_path(webhook_id, delivery_id))
        return parse_model(WebhookDelivery, document, "delivery", "data")

    async def retry_delivery(self, webhook_id: str, delivery_id: str) -> WebhookDelivery:
        document = await self._client.post(f"{_delivery_path(webhook_id, delivery_id)}/retry", {})
        return parse_model(WebhookDelivery, document, "delivery", "data")


__all__ = ["WebhooksResource"]
