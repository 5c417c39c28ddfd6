"""Pydantic models for Sendly API payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, FrozenSet, Generic, Iterator, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .classifier import Document


class SendlyModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RequestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # wire names dropped from the body when their value is None
    omit_when_none: ClassVar[FrozenSet[str]] = frozenset()


# --- messages -----------------------------------------------------------------


class MessageStatus:
    QUEUED = "queued"
    SENT = "sent"
    DELIVERED = "delivered"
    FAILED = "failed"


class Message(SendlyModel):
    id: str = ""
    to: str = ""
    from_: Optional[str] = Field(default=None, alias="from")
    text: str = ""
    status: str = ""
    direction: str = "outbound"
    segments: int = 1
    credits_used: int = 0
    is_sandbox: bool = False
    sender_type: Optional[str] = None
    telnyx_message_id: Optional[str] = None
    warning: Optional[str] = None
    sender_note: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def is_delivered(self) -> bool:
        return self.status == MessageStatus.DELIVERED

    @property
    def is_failed(self) -> bool:
        return self.status == MessageStatus.FAILED

    @property
    def is_pending(self) -> bool:
        return self.status in (MessageStatus.QUEUED, MessageStatus.SENT)


class SendMessageRequest(RequestModel):
    omit_when_none: ClassVar[FrozenSet[str]] = frozenset({"from", "message_type"})

    to: str
    text: str
    from_: Optional[str] = Field(default=None, alias="from")
    message_type: Optional[str] = None


class ScheduledMessageStatus:
    SCHEDULED = "scheduled"
    SENT = "sent"
    CANCELLED = "cancelled"
    FAILED = "failed"


class ScheduledMessage(SendlyModel):
    id: str = ""
    to: str = ""
    text: str = ""
    from_: Optional[str] = Field(default=None, alias="from")
    status: str = ""
    scheduled_at: Optional[datetime] = None
    credits_reserved: int = 0
    created_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    sent_at: Optional[datetime] = None
    error: Optional[str] = None

    @property
    def is_scheduled(self) -> bool:
        return self.status == ScheduledMessageStatus.SCHEDULED

    @property
    def is_cancelled(self) -> bool:
        return self.status == ScheduledMessageStatus.CANCELLED


class ScheduleMessageRequest(RequestModel):
    omit_when_none: ClassVar[FrozenSet[str]] = frozenset({"from"})

    to: str
    text: str
    scheduled_at: str
    from_: Optional[str] = Field(default=None, alias="from")


class CancelScheduledResult(SendlyModel):
    id: str = ""
    status: str = ""
    credits_refunded: int = 0
    cancelled_at: Optional[datetime] = None


class BatchStatus:
    PROCESSING = "processing"
    COMPLETED = "completed"
    PARTIALLY_COMPLETED = "partially_completed"
    FAILED = "failed"


class BatchMessageItem(RequestModel):
    to: str
    text: str


class BatchMessageResult(SendlyModel):
    id: Optional[str] = None
    to: str = ""
    status: str = ""
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == "queued"


class BatchResult(SendlyModel):
    batch_id: str = ""
    status: str = ""
    total: int = 0
    queued: int = 0
    failed: int = 0
    credits_used: int = 0
    messages: List[BatchMessageResult] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @property
    def is_processing(self) -> bool:
        return self.status == BatchStatus.PROCESSING

    @property
    def is_completed(self) -> bool:
        return self.status == BatchStatus.COMPLETED


class SendBatchRequest(RequestModel):
    omit_when_none: ClassVar[FrozenSet[str]] = frozenset({"from", "message_type"})

    messages: List[BatchMessageItem]
    from_: Optional[str] = Field(default=None, alias="from")
    message_type: Optional[str] = None


# --- webhooks -----------------------------------------------------------------


class WebhookEventType:
    MESSAGE_SENT = "message.sent"
    MESSAGE_DELIVERED = "message.delivered"
    MESSAGE_FAILED = "message.failed"
    MESSAGE_BOUNCED = "message.bounced"
    MESSAGE_RECEIVED = "message.received"


class Webhook(SendlyModel):
    id: str = ""
    url: str = ""
    events: List[str] = Field(default_factory=list)
    mode: str = "all"
    is_active: bool = True
    failure_count: int = 0
    circuit_state: str = "closed"
    api_version: Optional[str] = None
    total_deliveries: int = 0
    successful_deliveries: int = 0
    success_rate: float = 0.0
    last_delivery_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_healthy(self) -> bool:
        return self.is_active and self.circuit_state == "closed"

    @property
    def is_circuit_open(self) -> bool:
        return self.circuit_state == "open"


class WebhookCreated(SendlyModel):
    webhook: Webhook = Field(default_factory=Webhook)
    secret: str = ""


class CreateWebhookRequest(RequestModel):
    omit_when_none: ClassVar[FrozenSet[str]] = frozenset({"mode", "api_version"})

    url: str
    events: List[str]
    mode: Optional[str] = None
    api_version: Optional[str] = None


class UpdateWebhookRequest(RequestModel):
    omit_when_none: ClassVar[FrozenSet[str]] = frozenset({"url", "events", "is_active", "mode"})

    url: Optional[str] = None
    events: Optional[List[str]] = None
    is_active: Optional[bool] = None
    mode: Optional[str] = None


class WebhookDelivery(SendlyModel):
    id: str = ""
    webhook_id: str = ""
    event_type: str = ""
    http_status: int = 0
    success: bool = False
    attempt_number: int = 1
    error_message: Optional[str] = None
    response_time_ms: int = 0
    created_at: Optional[datetime] = None


class WebhookTestResult(SendlyModel):
    success: bool = False
    status_code: int = 0
    response_time_ms: int = 0
    error: Optional[str] = None


class WebhookSecretRotation(SendlyModel):
    secret: str = ""
    rotated_at: Optional[datetime] = None


class WebhookMessageData(SendlyModel):
    message_id: str = ""
    status: str = ""
    to: str = ""
    from_: str = Field(default="", alias="from")
    error: Optional[str] = None
    error_code: Optional[str] = None
    delivered_at: Optional[str] = None
    failed_at: Optional[str] = None
    segments: int = 1
    credits_used: int = 0


class WebhookEvent(SendlyModel):
    id: str = ""
    type: str = ""
    data: WebhookMessageData = Field(default_factory=WebhookMessageData)
    created_at: str = ""
    api_version: str = "2024-01-01"


# --- account ------------------------------------------------------------------


class AccountVerification(SendlyModel):
    email_verified: bool = False
    phone_verified: bool = False
    identity_verified: bool = False

    @property
    def is_fully_verified(self) -> bool:
        return self.email_verified and self.phone_verified and self.identity_verified


class AccountLimits(SendlyModel):
    messages_per_second: int = 10
    messages_per_day: int = 10000
    max_batch_size: int = 1000


class Account(SendlyModel):
    id: str = ""
    email: str = ""
    name: Optional[str] = None
    company_name: Optional[str] = None
    verification: AccountVerification = Field(default_factory=AccountVerification)
    limits: AccountLimits = Field(default_factory=AccountLimits)
    created_at: Optional[datetime] = None


class Credits(SendlyModel):
    balance: int = 0
    available_balance: int = 0
    pending_credits: int = 0
    reserved_credits: int = 0
    currency: str = "USD"

    @property
    def has_credits(self) -> bool:
        return self.available_balance > 0


class CreditTransaction(SendlyModel):
    id: str = ""
    type: str = ""
    amount: int = 0
    balance_after: int = 0
    description: Optional[str] = None
    reference_id: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def is_credit(self) -> bool:
        return self.amount > 0

    @property
    def is_debit(self) -> bool:
        return self.amount < 0


class ApiKey(SendlyModel):
    id: str = ""
    name: str = ""
    prefix: str = ""
    last_used_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    is_active: bool = True

    @property
    def is_expired(self) -> bool:
        if self.expires_at is None:
            return False
        expires = self.expires_at
        if expires.tzinfo is None:
            expires = expires.replace(tzinfo=timezone.utc)
        return expires < datetime.now(timezone.utc)


class CreatedApiKey(SendlyModel):
    api_key: ApiKey = Field(default_factory=ApiKey)
    key: str = ""


class CreateApiKeyRequest(RequestModel):
    omit_when_none: ClassVar[FrozenSet[str]] = frozenset({"expires_at"})

    name: str
    expires_at: Optional[str] = None


# --- list results -------------------------------------------------------------

M = TypeVar("M", bound=SendlyModel)


def _items(document: Document, keys: Sequence[str], model: Type[M]) -> List[M]:
    if isinstance(document, list):
        return [model.model_validate(item) for item in document]
    for key in keys:
        value = document.get(key)
        if isinstance(value, list):
            return [model.model_validate(item) for item in value]
    return []


def _int(document: Document, key: str, default: int) -> int:
    if isinstance(document, dict) and isinstance(document.get(key), int):
        return document[key]
    return default


@dataclass
class ListResult(Generic[M]):
    data: List[M] = field(default_factory=list)
    total: int = 0
    has_more: bool = False

    def __iter__(self) -> Iterator[M]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> M:
        return self.data[index]

    @property
    def is_empty(self) -> bool:
        return not self.data

    @property
    def first(self) -> Optional[M]:
        return self.data[0] if self.data else None

    @property
    def last(self) -> Optional[M]:
        return self.data[-1] if self.data else None


@dataclass
class OffsetListResult(ListResult[M]):
    limit: int = 20
    offset: int = 0


@dataclass
class MessageList(OffsetListResult[Message]):
    @classmethod
    def from_document(cls, document: Document) -> "MessageList":
        data = _items(document, ("data",), Message)
        pagination = document.get("pagination") if isinstance(document, dict) else None
        if not isinstance(pagination, dict):
            return cls(data=data, total=len(data))
        return cls(
            data=data,
            total=_int(pagination, "total", len(data)),
            limit=_int(pagination, "limit", 20),
            offset=_int(pagination, "offset", 0),
            has_more=bool(pagination.get("has_more", False)),
        )


def _offset_list(cls: Any, document: Document, model: Type[M]) -> Any:
    data = _items(document, ("data",), model)
    total = _int(document, "total", len(data))
    limit = _int(document, "limit", 20)
    offset = _int(document, "offset", 0)
    if isinstance(document, dict) and "has_more" in document:
        has_more = bool(document["has_more"])
    else:
        has_more = offset + len(data) < total
    return cls(data=data, total=total, limit=limit, offset=offset, has_more=has_more)


@dataclass
class ScheduledMessageList(OffsetListResult[ScheduledMessage]):
    @classmethod
    def from_document(cls, document: Document) -> "ScheduledMessageList":
        return _offset_list(cls, document, ScheduledMessage)


@dataclass
class BatchList(OffsetListResult[BatchResult]):
    @classmethod
    def from_document(cls, document: Document) -> "BatchList":
        return _offset_list(cls, document, BatchResult)


def _keyed_list(cls: Any, document: Document, key: str, model: Type[M]) -> Any:
    data = _items(document, (key, "data"), model)
    has_more = bool(document.get("has_more", False)) if isinstance(document, dict) else False
    return cls(data=data, total=_int(document, "total", len(data)), has_more=has_more)


@dataclass
class WebhookList(ListResult[Webhook]):
    @classmethod
    def from_document(cls, document: Document) -> "WebhookList":
        return _keyed_list(cls, document, "webhooks", Webhook)


@dataclass
class WebhookDeliveryList(ListResult[WebhookDelivery]):
    @classmethod
    def from_document(cls, document: Document) -> "WebhookDeliveryList":
        return _keyed_list(cls, document, "deliveries", WebhookDelivery)


@dataclass
class CreditTransactionList(ListResult[CreditTransaction]):
    @classmethod
    def from_document(cls, document: Document) -> "CreditTransactionList":
        return _keyed_list(cls, document, "transactions", CreditTransaction)


@dataclass
class ApiKeyList(ListResult[ApiKey]):
    @classmethod
    def from_document(cls, document: Document) -> "ApiKeyList":
        return _keyed_list(cls, document, "api_keys", ApiKey)


__all__ = [
    "Account",
    "AccountLimits",
    "AccountVerification",
    "ApiKey",
    "ApiKeyList",
    "BatchList",
    "BatchMessageItem",
    "BatchMessageResult",
    "BatchResult",
    "BatchStatus",
    "CancelScheduledResult",
    "CreateApiKeyRequest",
    "CreateWebhookRequest",
    "CreatedApiKey",
    "CreditTransaction",
    "CreditTransactionList",
    "Credits",
    "ListResult",
    "Message",
    "MessageList",
    "MessageStatus",
    "OffsetListResult",
    "RequestModel",
    "ScheduleMessageRequest",
    "ScheduledMessage",
    "ScheduledMessageList",
    "ScheduledMessageStatus",
    "SendBatchRequest",
    "SendMessageRequest",
    "SendlyModel",
    "UpdateWebhookRequest",
    "Webhook",
    "WebhookCreated",
    "WebhookDelivery",
    "WebhookDeliveryList",
    "WebhookEvent",
    "WebhookEventType",
    "WebhookList",
    "WebhookMessageData",
    "WebhookSecretRotation",
    "WebhookTestResult",
]
