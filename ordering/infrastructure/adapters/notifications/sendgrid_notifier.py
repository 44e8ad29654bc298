"""
SendGrid Notifier Implementation.

Simulates order confirmation emails through SendGrid. The message is
built and logged; nothing goes over the network.
"""
from typing import Any, Dict, List
import logging

from ordering.application.interfaces import INotifier
from ordering.domain.entities import Order
from ordering.domain.errors import NotificationFailed
from ordering.settings import NotificationSettings


logger = logging.getLogger(__name__)


class SendGridNotifier(INotifier):
    """
    Simulated SendGrid implementation of notifier.
    """

    def __init__(self, api_key: str, from_email: str):
        """
        Initialize SendGrid notifier.

        Args:
            api_key: SendGrid API key
            from_email: Sender address for confirmation emails
        """
        self.api_key = api_key
        self.from_email = from_email
        self.messages: List[Dict[str, Any]] = []
        logger.info("SendGridNotifier initialized")

    @classmethod
    def from_settings(cls, settings: NotificationSettings) -> "SendGridNotifier":
        return cls(api_key=settings.sendgrid_api_key, from_email=settings.from_email)

    def notify(self, order: Order) -> None:
        """
        Send an order confirmation email.

        Args:
            order: Placed order

        Raises:
            NotificationFailed: If no API key is configured
        """
        if not self.api_key:
            logger.error("SendGrid api_key not configured, cannot send email")
            raise NotificationFailed("SendGrid API key not configured")

        message = self._build_message(order)
        self.messages.append(message)

        logger.info(f"[SendGrid API] Sending email: '{message['subject']}'")

    def _build_message(self, order: Order) -> Dict[str, Any]:
        lines = [f"- {item.name}: {item.price}" for item in order.items]
        body = "\n".join(
            [f"Thank you for your order #{order.id.value}.", *lines, f"Total: {order.total}"]
        )
        return {
            "from": self.from_email,
            "subject": f"Order #{order.id.value} Confirmed",
            "content": body,
        }
