"""Shared fixtures: test doubles for the order placement ports."""
from typing import Dict, List, Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from ordering.application.interfaces import INotifier, IPaymentCharger
from ordering.domain.entities import LineItem, Order
from ordering.domain.errors import NotificationFailed, PaymentFailed, StorageFailed
from ordering.domain.repositories import OrderRepository
from ordering.domain.value_objects import Money, OrderId
from ordering.infrastructure.database import create_schema, get_session_factory


class FakeOrderRepository(OrderRepository):
    """Fake OrderRepository recording calls; can be told to fail."""

    def __init__(self, fail_save: bool = False, fail_find: bool = False) -> None:
        self.orders: Dict[OrderId, Order] = {}
        self.fail_save = fail_save
        self.fail_find = fail_find
        self.save_calls = 0
        self.find_calls = 0

    def save(self, order: Order) -> None:
        self.save_calls += 1
        if self.fail_save:
            raise StorageFailed("disk full")
        self.orders[order.id] = order

    def find(self, order_id: OrderId) -> Optional[Order]:
        self.find_calls += 1
        if self.fail_find:
            raise StorageFailed("connection lost")
        return self.orders.get(order_id)


class FakePaymentCharger(IPaymentCharger):
    """Fake IPaymentCharger recording charged amounts."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.charges: List[Money] = []

    def charge(self, amount: Money) -> None:
        self.charges.append(amount)
        if self.fail:
            raise PaymentFailed("card declined")


class FakeNotifier(INotifier):
    """Fake INotifier recording notified orders."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.notified: List[Order] = []

    def notify(self, order: Order) -> None:
        self.notified.append(order)
        if self.fail:
            raise NotificationFailed("smtp timeout")


@pytest.fixture
def fake_repository():
    return FakeOrderRepository()


@pytest.fixture
def fake_payment():
    return FakePaymentCharger()


@pytest.fixture
def fake_notifier():
    return FakeNotifier()


@pytest.fixture
def book_and_pen():
    """Line items from the reference scenario: $49.99 + $1.99."""
    return [
        LineItem(name="Book", price=Money(4999)),
        LineItem(name="Pen", price=Money(199)),
    ]


@pytest.fixture
def test_engine():
    """In-memory SQLite engine with the schema created."""
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    return get_session_factory(test_engine)
