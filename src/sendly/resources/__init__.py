"""Resource facades exposed on :class:`sendly.SendlyClient`."""

from .account import AccountResource
from .messages import MessagesResource
from .webhooks import WebhooksResource

__all__ = ["AccountResource", "MessagesResource", "WebhooksResource"]
