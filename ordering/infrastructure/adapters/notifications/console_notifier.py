"""
Console Notifier Implementation.

"Sends" notifications by logging them. Useful for testing and demos.
"""
from typing import List
import logging

from ordering.application.interfaces import INotifier
from ordering.domain.entities import Order


logger = logging.getLogger(__name__)


class ConsoleNotifier(INotifier):
    """
    Console implementation of notifier.

    Logs notifications instead of actually sending them.
    """

    def __init__(self):
        """Initialize console notifier."""
        self.sent: List[Order] = []
        logger.info("ConsoleNotifier initialized (console logging)")

    def notify(self, order: Order) -> None:
        """
        Simulate an order confirmation.

        Args:
            order: Placed order
        """
        self.sent.append(order)
        logger.info(f"🔔 [Console] Order #{order.id.value} confirmed! Total: {order.total}")

    def clear(self) -> None:
        """Clear notifications (for testing)."""
        self.sent.clear()
