"""
SQLAlchemy Order Repository Implementation.

Implements OrderRepository interface using SQLAlchemy. Database errors
are translated into StorageFailed; callers never see SQLAlchemy types.
"""
from typing import List, Optional
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload, sessionmaker

from ordering.domain.entities import LineItem, Order
from ordering.domain.errors import InvalidOrder, StorageFailed
from ordering.domain.repositories import OrderRepository
from ordering.domain.value_objects import Money, OrderId
from ordering.infrastructure.database.models import OrderItemModel, OrderModel


logger = logging.getLogger(__name__)


class SQLAlchemyOrderRepository(OrderRepository):
    """
    SQLAlchemy implementation of OrderRepository.

    Opens one short-lived session per call and commits it before
    returning, so a successful ``save`` is visible to the next ``find``.
    """

    def __init__(self, session_factory: sessionmaker):
        """
        Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy sessionmaker bound to an engine
        """
        self._session_factory = session_factory

    def save(self, order: Order) -> None:
        """
        Save or update order in database.

        Args:
            order: Order entity to persist

        Raises:
            StorageFailed: On any database error, or an amount outside
                the 64-bit INTEGER column range
        """
        logger.info(f"Saving order: {order.id}")

        try:
            with self._session_factory() as session, session.begin():
                existing_order = session.get(OrderModel, order.id.value)

                if existing_order is not None:
                    self._update_order(session, existing_order, order)
                    logger.info(f"✅ Updated order: {order.id}")
                else:
                    session.add(self._to_model(order))
                    logger.info(f"✅ Created order: {order.id}")
        except (SQLAlchemyError, OverflowError) as exc:
            logger.error(f"Database error while saving {order.id}: {exc}")
            raise StorageFailed(f"Could not save order {order.id}") from exc

    def find(self, order_id: OrderId) -> Optional[Order]:
        """
        Get order by ID.

        Args:
            order_id: Order ID to lookup

        Returns:
            Order entity if found, None otherwise

        Raises:
            StorageFailed: On any database error or a stored total that
                does not match its items
        """
        logger.info(f"Getting order: {order_id}")

        try:
            with self._session_factory() as session:
                result = session.execute(
                    select(OrderModel)
                    .options(selectinload(OrderModel.items))
                    .where(OrderModel.id == order_id.value)
                )
                order_model = result.scalar_one_or_none()

                if order_model is None:
                    logger.info(f"Order not found: {order_id}")
                    return None

                order = self._to_domain_entity(order_model)
        except SQLAlchemyError as exc:
            logger.error(f"Database error while reading {order_id}: {exc}")
            raise StorageFailed(f"Could not read order {order_id}") from exc

        logger.info(f"✅ Found order: {order_id}")
        return order

    # =========================================================================
    # MAPPING
    # =========================================================================

    def _update_order(self, session: Session, order_model: OrderModel, order: Order) -> None:
        order_model.total_amount = order.total.amount

        # Old rows must be gone before the replacements are inserted
        order_model.items.clear()
        session.flush()
        order_model.items.extend(self._to_item_models(order))

    def _to_model(self, order: Order) -> OrderModel:
        return OrderModel(
            id=order.id.value,
            total_amount=order.total.amount,
            items=self._to_item_models(order),
        )

    @staticmethod
    def _to_item_models(order: Order) -> List[OrderItemModel]:
        return [
            OrderItemModel(position=position, name=item.name, price_amount=item.price.amount)
            for position, item in enumerate(order.items)
        ]

    @staticmethod
    def _to_domain_entity(order_model: OrderModel) -> Order:
        try:
            order = Order.create(
                OrderId(order_model.id),
                [
                    LineItem(name=item_model.name, price=Money(item_model.price_amount))
                    for item_model in order_model.items
                ],
            )
        except (InvalidOrder, ValueError, TypeError) as exc:
            raise StorageFailed(f"Stored order {order_model.id} is corrupt: {exc}") from exc

        if order.total.amount != order_model.total_amount:
            raise StorageFailed(
                f"Stored total mismatch for {order.id}: "
                f"{order_model.total_amount} vs {order.total.amount}"
            )

        return order
