"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from ..errors import InvalidOrder
from ..value_objects import Money, OrderId


@dataclass(frozen=True)
class LineItem:
    """Individual line item within an order."""
    name: str
    price: Money


@dataclass(frozen=True)
class Order:
    """
    Order aggregate root.

    An order always has at least one item, and its total is the exact sum of
    the item prices, computed once here and never touched again.
    """
    id: OrderId
    items: Tuple[LineItem, ...]
    total: Money = field(init=False)

    def __post_init__(self):
        items = tuple(self.items)

        # Business rule: an order must have items
        if not items:
            raise InvalidOrder("An order must contain at least one item")

        total = Money.zero()
        for item in items:
            total = total + item.price

        object.__setattr__(self, "items", items)
        object.__setattr__(self, "total", total)

    @classmethod
    def create(cls, order_id: OrderId, items: Iterable[LineItem]) -> "Order":
        """
        Factory method to create a new Order.

        Args:
            order_id: Order identifier
            items: Line items, in display order

        Returns:
            New Order instance with its total computed

        Raises:
            InvalidOrder: If items is empty
        """
        return cls(id=order_id, items=tuple(items))
