"""
In-Memory Order Repository Implementation.

This is an in-memory implementation for testing and demos.
Data is gone when the process exits.
"""
from typing import Dict, List, Optional
import logging

from ordering.domain.entities import Order
from ordering.domain.repositories import OrderRepository
from ordering.domain.value_objects import OrderId


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Stores orders in a dictionary keyed by OrderId. Not synchronized:
    confine an instance to one thread.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[OrderId, Order] = {}
        logger.info("InMemoryOrderRepository initialized (in-memory storage)")

    def save(self, order: Order) -> None:
        """
        Save order to in-memory storage.

        Args:
            order: Order entity to save
        """
        self._storage[order.id] = order
        logger.info(f"✅ Order saved to in-memory repository: {order.id} (total: {order.total})")

    def find(self, order_id: OrderId) -> Optional[Order]:
        """
        Get order by ID from in-memory storage.

        Args:
            order_id: Order ID to lookup

        Returns:
            Order if found, None otherwise
        """
        order = self._storage.get(order_id)

        if order:
            logger.info(f"Order found in in-memory repository: {order_id}")
        else:
            logger.info(f"Order not found in in-memory repository: {order_id}")

        return order

    def get_all(self) -> List[Order]:
        """Get all orders, in insertion order (for demo/testing)."""
        return list(self._storage.values())

    def count(self) -> int:
        """Number of stored orders."""
        return len(self._storage)

    def clear(self) -> None:
        """Clear all orders (for demo/testing)."""
        self._storage.clear()
        logger.info("In-memory repository cleared")
