"""Notification ports for order confirmations.

Both channels are best-effort: a sender raises NotificationError when
delivery fails, and the dispatcher logs and drops it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class NotifiedItem:
    name: str
    quantity: int
    price_at_order: str  # formatted, e.g. "$10.00"


@dataclass(frozen=True)
class OrderConfirmationDetails:
    order_id: int
    customer_name: str
    customer_email: str
    address: str
    phone: str
    total: str
    items: list[NotifiedItem]
    status: str


class OrderEmailSender(ABC):

    @abstractmethod
    def send_order_confirmation(self, details: OrderConfirmationDetails) -> None:
        """Email the customer their order confirmation."""


class OrderChatNotifier(ABC):

    @abstractmethod
    def send_order_notification(self, details: OrderConfirmationDetails) -> None:
        """Announce a new order on the shop's chat channel."""
