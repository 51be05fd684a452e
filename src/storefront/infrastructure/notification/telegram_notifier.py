"""Telegram bot implementation of OrderChatNotifier."""

from __future__ import annotations

from html import escape

import requests

from storefront.domain.exceptions import NotificationError
from storefront.domain.notification.senders import (
    OrderChatNotifier,
    OrderConfirmationDetails,
)

TELEGRAM_API_URL = "https://api.telegram.org"


class TelegramOrderNotifier(OrderChatNotifier):

    def __init__(
        self,
        bot_token: str,
        chat_id: str,
        session: requests.Session | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._url = f"{TELEGRAM_API_URL}/bot{bot_token}/sendMessage"
        self._chat_id = chat_id
        self._session = session or requests.Session()
        self._timeout = timeout

    def send_order_notification(self, details: OrderConfirmationDetails) -> None:
        payload = {
            "chat_id": self._chat_id,
            "text": self.format_message(details),
            "parse_mode": "HTML",
        }
        try:
            response = self._session.post(self._url, json=payload, timeout=self._timeout)
            response.raise_for_status()
            body = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise NotificationError(
                f"Telegram notification for order #{details.order_id} failed: {exc}"
            ) from exc

        if not body.get("ok", False):
            raise NotificationError(
                f"Telegram rejected order #{details.order_id}: "
                f"{body.get('description', 'unknown error')}"
            )

    @staticmethod
    def format_message(details: OrderConfirmationDetails) -> str:
        items = "\n".join(
            f"- {escape(item.name)} x{item.quantity} @ {item.price_at_order}"
            for item in details.items
        )
        return (
            f"<b>New order #{details.order_id}</b> ({details.status})\n"
            f"Customer: {escape(details.customer_name)} ({escape(details.customer_email)})\n"
            f"Phone: {escape(details.phone)}\n"
            f"Address: {escape(details.address)}\n"
            f"{items}\n"
            f"<b>Total: {details.total}</b>"
        )
