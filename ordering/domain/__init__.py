"""Domain layer - pure domain models and interfaces."""

from .entities import LineItem, Order
from .errors import (
    InvalidOrder,
    NotificationFailed,
    OrderError,
    PaymentFailed,
    StorageFailed,
)
from .repositories import OrderRepository
from .value_objects import Money, OrderId

__all__ = [
    "InvalidOrder",
    "LineItem",
    "Money",
    "NotificationFailed",
    "Order",
    "OrderError",
    "OrderId",
    "OrderRepository",
    "PaymentFailed",
    "StorageFailed",
]
