"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  Settings are read on
each call, so changing the environment (as tests do) takes effect.
"""

from __future__ import annotations

from storefront.application.order_notifications import OrderNotificationDispatcher
from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.notification.senders import OrderChatNotifier, OrderEmailSender
from storefront.infrastructure.config import Settings
from storefront.infrastructure.notification.log_senders import (
    LoggingChatNotifier,
    LoggingEmailSender,
)
from storefront.infrastructure.notification.smtp_email_sender import SmtpEmailSender
from storefront.infrastructure.notification.telegram_notifier import (
    TelegramOrderNotifier,
)
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonCategoryRepository,
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)


def settings() -> Settings:
    return Settings.from_env()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def category_repository() -> JsonCategoryRepository:
    return JsonCategoryRepository(settings().data_dir / "categories.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(settings().data_dir / "carts.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def user_repository() -> JsonUserRepository:
    return JsonUserRepository(settings().data_dir / "users.json")


def email_sender() -> OrderEmailSender:
    cfg = settings()
    if not cfg.email_enabled:
        return LoggingEmailSender()
    return SmtpEmailSender(
        host=cfg.smtp_host,  # type: ignore[arg-type]
        port=cfg.smtp_port,
        username=cfg.smtp_user,
        password=cfg.smtp_password,
        sender=cfg.smtp_sender,
    )


def chat_notifier() -> OrderChatNotifier:
    cfg = settings()
    if not cfg.telegram_enabled:
        return LoggingChatNotifier()
    return TelegramOrderNotifier(
        bot_token=cfg.telegram_bot_token,  # type: ignore[arg-type]
        chat_id=cfg.telegram_chat_id,  # type: ignore[arg-type]
    )


def place_order_handler() -> PlaceOrderHandler:
    return PlaceOrderHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
        order_repo=order_repository(),
        notifier=OrderNotificationDispatcher(
            user_repo=user_repository(),
            email_sender=email_sender(),
            chat_notifier=chat_notifier(),
        ),
    )
