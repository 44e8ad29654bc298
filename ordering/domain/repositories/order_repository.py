"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.order import Order
from ..value_objects import OrderId


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist order aggregate.

        Saving an order whose id is already stored overwrites it.

        Args:
            order: Order aggregate to persist

        Raises:
            StorageFailed: If the order could not be stored
        """
        pass

    @abstractmethod
    def find(self, order_id: OrderId) -> Optional[Order]:
        """Retrieve order by identifier.

        Args:
            order_id: OrderId identifier

        Returns:
            Order if found, None otherwise

        Raises:
            StorageFailed: If the storage could not be read
        """
        pass
