"""Best-effort order confirmation notifications.

Runs after an order is committed.  Nothing raised here may reach the
caller: the order is already confirmed, so every failure is logged and
dropped, one channel at a time.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import NotificationError
from storefront.domain.model.order import Order
from storefront.domain.notification.senders import (
    NotifiedItem,
    OrderChatNotifier,
    OrderConfirmationDetails,
    OrderEmailSender,
)
from storefront.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class OrderNotificationDispatcher:

    def __init__(
        self,
        user_repo: UserRepository,
        email_sender: OrderEmailSender,
        chat_notifier: OrderChatNotifier,
    ) -> None:
        self._user_repo = user_repo
        self._email_sender = email_sender
        self._chat_notifier = chat_notifier

    def dispatch(self, order: Order) -> None:
        log = logger.bind(order_id=order.id, user_id=order.user_id)
        try:
            details = self._build_details(order)
        except Exception:
            log.exception("order_notification_failed", channel="all")
            return

        channels = (
            ("email", self._email_sender.send_order_confirmation),
            ("chat", self._chat_notifier.send_order_notification),
        )
        for channel, send in channels:
            try:
                send(details)
            except Exception:
                log.exception("order_notification_failed", channel=channel)
            else:
                log.info("order_notification_sent", channel=channel)

    def _build_details(self, order: Order) -> OrderConfirmationDetails:
        user = self._user_repo.get_by_id(order.user_id)
        if user is None:
            raise NotificationError(f"No profile for user '{order.user_id}'")
        return OrderConfirmationDetails(
            order_id=order.id,  # type: ignore[arg-type]
            customer_name=user.name,
            customer_email=user.email,
            address=order.address,
            phone=order.phone,
            total=str(order.total),
            items=[
                NotifiedItem(
                    name=item.product_name,
                    quantity=item.quantity.value,
                    price_at_order=str(item.price_at_order),
                )
                for item in order.items
            ],
            status=order.status.value,
        )
