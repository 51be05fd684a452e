"""Senders used when no email or chat transport is configured.

They only log, so order placement works the same with or without
notification credentials.
"""

from __future__ import annotations

import structlog

from storefront.domain.notification.senders import (
    OrderChatNotifier,
    OrderConfirmationDetails,
    OrderEmailSender,
)

logger = structlog.get_logger(__name__)


class LoggingEmailSender(OrderEmailSender):

    def send_order_confirmation(self, details: OrderConfirmationDetails) -> None:
        logger.info(
            "order_email_skipped",
            order_id=details.order_id,
            to=details.customer_email,
            reason="smtp not configured",
        )


class LoggingChatNotifier(OrderChatNotifier):

    def send_order_notification(self, details: OrderConfirmationDetails) -> None:
        logger.info(
            "order_chat_skipped",
            order_id=details.order_id,
            total=details.total,
            reason="telegram not configured",
        )
