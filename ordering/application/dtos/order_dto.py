"""Application DTOs for Order operations."""

from typing import List

from pydantic import BaseModel, Field

from ordering.domain.entities import LineItem, Order
from ordering.domain.value_objects import Money


class LineItemDTO(BaseModel):
    """DTO for a line item."""

    name: str = Field(..., min_length=1, description="Item display name")
    price_cents: int = Field(..., ge=0, description="Unit price in cents")

    model_config = {"frozen": True, "strict": True}

    def to_domain(self) -> LineItem:
        return LineItem(name=self.name, price=Money(self.price_cents))

    @classmethod
    def from_domain(cls, item: LineItem) -> "LineItemDTO":
        return cls(name=item.name, price_cents=item.price.amount)


class PlaceOrderRequest(BaseModel):
    """
    Request DTO for placing an order.

    An empty item list is accepted here; the domain rejects it with
    InvalidOrder.
    """

    items: List[LineItemDTO] = Field(default_factory=list, description="Order items")

    model_config = {"frozen": True}

    def to_line_items(self) -> List[LineItem]:
        """Transform the request items into domain line items."""
        return [item.to_domain() for item in self.items]


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    order_id: int = Field(..., ge=0, description="Order identifier")
    items: List[LineItemDTO] = Field(default_factory=list, description="Order items")
    total_cents: int = Field(..., ge=0, description="Order total in cents")
    total_display: str = Field(..., description="Order total formatted for display")

    model_config = {"frozen": True}

    @classmethod
    def from_domain(cls, order: Order) -> "OrderDTO":
        """Transform Order domain entity to OrderDTO.

        Args:
            order: Order domain entity

        Returns:
            OrderDTO instance
        """
        return cls(
            order_id=order.id.value,
            items=[LineItemDTO.from_domain(item) for item in order.items],
            total_cents=order.total.amount,
            total_display=str(order.total),
        )
