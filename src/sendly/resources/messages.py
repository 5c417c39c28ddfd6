"""Messages resource: send, list, schedule, and batch SMS."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Union

from ..models import (
    BatchList,
    BatchMessageItem,
    BatchResult,
    CancelScheduledResult,
    Message,
    MessageList,
    ScheduledMessage,
    ScheduledMessageList,
    ScheduleMessageRequest,
    SendBatchRequest,
    SendMessageRequest,
)
from ..pagination import AsyncPager
from ..transport import quote_path_segment
from ..validation import (
    MAX_PAGE_SIZE,
    cap_limit,
    require_id,
    require_items,
    validate_phone,
    validate_scheduled_at,
    validate_text,
)
from .base import Resource, parse_list, parse_model

BatchItemLike = Union[BatchMessageItem, Mapping[str, str]]


def _batch_item(item: BatchItemLike) -> BatchMessageItem:
    if isinstance(item, BatchMessageItem):
        return item
    return BatchMessageItem(to=item.get("to") or "", text=item.get("text") or "")


class MessagesResource(Resource):
    async def send(
        self,
        to: str,
        text: str,
        *,
        from_: Optional[str] = None,
        message_type: Optional[str] = None,
    ) -> Message:
        validate_phone(to)
        validate_text(text)
        request = SendMessageRequest(to=to, text=text, from_=from_, message_type=message_type)
        document = await self._client.post("/messages", request)
        return parse_model(Message, document, "message", "data")

    async def list(
        self,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        status: Optional[str] = None,
        to: Optional[str] = None,
    ) -> MessageList:
        params: Dict[str, Any] = {"limit": cap_limit(limit), "offset": offset, "status": status, "to": to}
        document = await self._client.get("/messages", params)
        return parse_list(MessageList, document)

    async def get(self, message_id: str) -> Message:
        require_id(message_id, "Message ID")
        document = await self._client.get(f"/messages/{quote_path_segment(message_id)}")
        return parse_model(Message, document, "data", "message")

    def get_all(
        self,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        status: Optional[str] = None,
        to: Optional[str] = None,
    ) -> AsyncPager[Message]:
        page_size = cap_limit(limit) or MAX_PAGE_SIZE

        async def fetch_page(size: int, page_offset: int) -> MessageList:
            return await self.list(limit=size, offset=page_offset, status=status, to=to)

        return AsyncPager(fetch_page, page_size=page_size, start_offset=offset or 0)

    async def schedule(
        self,
        to: str,
        text: str,
        scheduled_at: str,
        *,
        from_: Optional[str] = None,
    ) -> ScheduledMessage:
        validate_phone(to)
        validate_text(text)
        validate_scheduled_at(scheduled_at)
        request = ScheduleMessageRequest(to=to, text=text, scheduled_at=scheduled_at, from_=from_)
        document = await self._client.post("/messages/schedule", request)
        return parse_model(ScheduledMessage, document, "data")

    async def list_scheduled(
        self,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        status: Optional[str] = None,
    ) -> ScheduledMessageList:
        params: Dict[str, Any] = {"limit": cap_limit(limit), "offset": offset, "status": status}
        document = await self._client.get("/messages/scheduled", params)
        return parse_list(ScheduledMessageList, document)

    async def get_scheduled(self, scheduled_id: str) -> ScheduledMessage:
        require_id(scheduled_id, "Scheduled message ID")
        document = await self._client.get(f"/messages/scheduled/{quote_path_segment(scheduled_id)}")
        return parse_model(ScheduledMessage, document, "data")

    async def cancel_scheduled(self, scheduled_id: str) -> CancelScheduledResult:
        require_id(scheduled_id, "Scheduled message ID")
        document = await self._client.delete(f"/messages/scheduled/{quote_path_segment(scheduled_id)}")
        return parse_model(CancelScheduledResult, document)

    async def send_batch(
        self,
        messages: Iterable[BatchItemLike],
        *,
        from_: Optional[str] = None,
        message_type: Optional[str] = None,
    ) -> BatchResult:
        items = [_batch_item(item) for item in messages or ()]
        require_items(items, "At least one message is required")
        for item in items:
            validate_phone(item.to)
            validate_text(item.text)
        request = SendBatchRequest(messages=items, from_=from_, message_type=message_type)
        document = await self._client.post("/messages/batch", request)
        return parse_model(BatchResult, document)

    async def get_batch(self, batch_id: str) -> BatchResult:
        require_id(batch_id, "Batch ID")
        document = await self._client.get(f"/messages/batch/{quote_path_segment(batch_id)}")
        return parse_model(BatchResult, document)

    async def list_batches(
        self,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        status: Optional[str] = None,
    ) -> BatchList:
        params: Dict[str, Any] = {"limit": cap_limit(limit), "offset": offset, "status": status}
        document = await self._client.get("/messages/batches", params)
        return parse_list(BatchList, document)


__all__ = ["MessagesResource"]
