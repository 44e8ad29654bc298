"""
Unit tests for the payment and notification adapters.
"""
import logging

import pytest

from ordering.domain.entities import LineItem, Order
from ordering.domain.errors import NotificationFailed, PaymentFailed
from ordering.domain.value_objects import Money, OrderId
from ordering.infrastructure.adapters.notifications import ConsoleNotifier, SendGridNotifier
from ordering.infrastructure.adapters.payment import MockPaymentCharger, StripePaymentCharger
from ordering.settings import NotificationSettings, PaymentSettings


@pytest.fixture
def order():
    return Order.create(
        OrderId(1),
        [LineItem(name="Book", price=Money(4999)), LineItem(name="Pen", price=Money(199))],
    )


class TestMockPaymentCharger:

    def test_charge_succeeds_and_records(self):
        charger = MockPaymentCharger()

        charger.charge(Money(1000))

        assert charger.charges == [Money(1000)]

    def test_decline_raises_payment_failed(self):
        charger = MockPaymentCharger(decline=True)

        with pytest.raises(PaymentFailed):
            charger.charge(Money(1000))

        assert charger.charges == []

    def test_clear(self):
        charger = MockPaymentCharger()
        charger.charge(Money(1))

        charger.clear()

        assert charger.charges == []


class TestStripePaymentCharger:

    def test_charge_builds_request_in_cents(self):
        charger = StripePaymentCharger(api_key="sk_test_123", currency="USD")

        charger.charge(Money(5000))

        assert charger.requests == [{"amount": 5000, "currency": "usd", "source": "tok_visa"}]

    def test_missing_api_key_raises_payment_failed(self):
        charger = StripePaymentCharger(api_key="")

        with pytest.raises(PaymentFailed):
            charger.charge(Money(5000))

        assert charger.requests == []

    def test_from_settings(self):
        settings = PaymentSettings(
            _env_file=None, gateway="stripe", stripe_api_key="sk_live_x", currency="eur"
        )

        charger = StripePaymentCharger.from_settings(settings)

        assert charger.api_key == "sk_live_x"
        assert charger.currency == "eur"


class TestConsoleNotifier:

    def test_notify_records_and_logs(self, order, caplog):
        notifier = ConsoleNotifier()

        with caplog.at_level(logging.INFO, logger="ordering"):
            notifier.notify(order)

        assert notifier.sent == [order]
        assert "Order #1 confirmed! Total: $51.98" in caplog.text


class TestSendGridNotifier:

    def test_notify_builds_message(self, order):
        notifier = SendGridNotifier(api_key="SG.key", from_email="shop@example.com")

        notifier.notify(order)

        message = notifier.messages[0]
        assert message["from"] == "shop@example.com"
        assert message["subject"] == "Order #1 Confirmed"
        assert "- Book: $49.99" in message["content"]
        assert "Total: $51.98" in message["content"]

    def test_missing_api_key_raises_notification_failed(self, order):
        notifier = SendGridNotifier(api_key="", from_email="shop@example.com")

        with pytest.raises(NotificationFailed) as exc_info:
            notifier.notify(order)

        # The adapter does not know the order placement context
        assert exc_info.value.order is None
        assert notifier.messages == []

    def test_from_settings(self):
        settings = NotificationSettings(
            _env_file=None, channel="sendgrid", sendgrid_api_key="SG.x", from_email="a@b.c"
        )

        notifier = SendGridNotifier.from_settings(settings)

        assert notifier.api_key == "SG.x"
        assert notifier.from_email == "a@b.c"
