"""
Domain errors for order operations.

These are business failures, not technical ones. Adapters translate their
own errors (database, HTTP, ...) into one of these kinds.
"""
from typing import Optional


class OrderError(Exception):
    """Base class for every order placement failure."""

    default_message = "Order operation failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidOrder(OrderError):
    """Order violates business rules (e.g., no items)."""

    default_message = "InvalidOrder"


class PaymentFailed(OrderError):
    """Payment processing failed."""

    default_message = "PaymentFailed"


class StorageFailed(OrderError):
    """Storage operation failed."""

    default_message = "StorageFailed"


class NotificationFailed(OrderError):
    """
    Notification delivery failed.

    Raised after payment and storage already succeeded, so ``order`` holds
    the placed order when the failure comes out of ``OrderService.place_order``.
    """

    default_message = "NotificationFailed"

    def __init__(self, message: Optional[str] = None, order=None):
        super().__init__(message)
        self.order = order


__all__ = [
    "OrderError",
    "InvalidOrder",
    "PaymentFailed",
    "StorageFailed",
    "NotificationFailed",
]
