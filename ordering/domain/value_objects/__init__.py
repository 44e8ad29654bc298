"""Domain value objects."""

from .value_objects import Money, OrderId

__all__ = [
    "Money",
    "OrderId",
]
