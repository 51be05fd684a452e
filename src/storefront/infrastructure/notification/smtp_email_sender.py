"""SMTP implementation of OrderEmailSender."""

from __future__ import annotations

import smtplib
from email.message import EmailMessage
from html import escape

from storefront.domain.exceptions import NotificationError
from storefront.domain.notification.senders import (
    OrderConfirmationDetails,
    OrderEmailSender,
)


class SmtpEmailSender(OrderEmailSender):

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        sender: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._sender = sender or username or f"orders@{host}"
        self._timeout = timeout

    def send_order_confirmation(self, details: OrderConfirmationDetails) -> None:
        if not details.customer_email:
            raise NotificationError(f"Order #{details.order_id} has no customer email")

        message = self.build_message(details)
        try:
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as smtp:
                smtp.starttls()
                if self._username:
                    smtp.login(self._username, self._password or "")
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise NotificationError(
                f"Could not email confirmation for order #{details.order_id}: {exc}"
            ) from exc

    def build_message(self, details: OrderConfirmationDetails) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = f"Order Confirmation - #{details.order_id}"
        message["From"] = self._sender
        message["To"] = details.customer_email

        lines = [
            f"Dear {details.customer_name},",
            "",
            f"Your order #{details.order_id} has been {details.status}.",
            f"Shipping address: {details.address}",
            f"Total: {details.total}",
            "",
            "Items:",
        ]
        lines += [
            f"  - {item.name} (x{item.quantity}) - {item.price_at_order} each"
            for item in details.items
        ]
        lines += ["", "Thank you for your purchase!"]
        message.set_content("\n".join(lines))

        items_html = "".join(
            f"<li>{escape(item.name)} (x{item.quantity}) - {item.price_at_order} each</li>"
            for item in details.items
        )
        message.add_alternative(
            "<h1>Order Confirmation</h1>"
            f"<p>Dear {escape(details.customer_name)},</p>"
            f"<p>Your order #{details.order_id} has been {details.status}.</p>"
            f"<p><strong>Shipping Address:</strong> {escape(details.address)}</p>"
            f"<p><strong>Total:</strong> {details.total}</p>"
            f"<h2>Items:</h2><ul>{items_html}</ul>"
            "<p>Thank you for your purchase!</p>",
            subtype="html",
        )
        return message
