"""Application service for Order operations."""

import logging
from typing import Optional, Sequence

from ordering.application.interfaces import INotifier, IPaymentCharger
from ordering.domain.entities import LineItem, Order
from ordering.domain.errors import NotificationFailed
from ordering.domain.repositories import OrderRepository
from ordering.domain.value_objects import OrderId


logger = logging.getLogger(__name__)


class OrderService:
    """
    Application service for orchestrating order operations.

    Depends only on the ports; the concrete adapters are chosen by the
    caller and injected here for the lifetime of the service.

    Flow of ``place_order``:
    1. Allocate the next OrderId
    2. Create Order entity with validation
    3. Charge payment
    4. Save to repository
    5. Notify customer

    Payment comes before saving so an unpaid order is never recorded
    or announced. A failure at any step stops the flow; nothing is
    retried or rolled back.
    """

    def __init__(
        self,
        repository: OrderRepository,
        payment_charger: IPaymentCharger,
        notifier: INotifier,
    ) -> None:
        """Initialize order service.

        Args:
            repository: Repository for order persistence
            payment_charger: Charger used to take payment
            notifier: Notifier used to confirm orders to customers
        """
        self._repository = repository
        self._payment_charger = payment_charger
        self._notifier = notifier

        # Identifiers name placement attempts, so failed calls still use one.
        self._next_id = 1

    def place_order(self, items: Sequence[LineItem]) -> Order:
        """Place a new order.

        Args:
            items: Line items to order

        Returns:
            The placed Order

        Raises:
            InvalidOrder: If items is empty (nothing was charged)
            PaymentFailed: If the charge failed (nothing was saved)
            StorageFailed: If saving failed (payment was already taken)
            NotificationFailed: If notifying failed; the placed order is
                attached as ``exc.order``
        """
        order_id = self._allocate_id()

        order = Order.create(order_id, items)
        logger.debug(f"[{order_id}] Order created: total={order.total}")

        self._payment_charger.charge(order.total)
        logger.debug(f"[{order_id}] Payment captured")

        self._repository.save(order)
        logger.debug(f"[{order_id}] Order saved")

        try:
            self._notifier.notify(order)
        except NotificationFailed as exc:
            exc.order = order
            raise
        logger.debug(f"[{order_id}] Customer notified")

        return order

    def get_order(self, order_id: OrderId) -> Optional[Order]:
        """Get order by ID.

        Args:
            order_id: OrderId to look up

        Returns:
            Order if found, None otherwise

        Raises:
            StorageFailed: If the repository could not be read
        """
        return self._repository.find(order_id)

    def _allocate_id(self) -> OrderId:
        order_id = OrderId(self._next_id)
        self._next_id += 1
        return order_id
