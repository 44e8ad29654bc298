"""
End-to-End Demo: Order Placement

This demonstrates the same OrderService wired three ways:
1. Testing adapters (in-memory repository, mock payment, console notifier)
2. "Production" adapters (SQL repository, Stripe, SendGrid), built from settings
3. A declined payment, showing that nothing is saved or notified

Uses simulated external services (no network, no real database needed).
"""
import logging

from ordering.application.dtos import LineItemDTO, OrderDTO, PlaceOrderRequest
from ordering.application.services import OrderService
from ordering.bootstrap import build_order_service
from ordering.domain.errors import OrderError
from ordering.infrastructure.adapters.notifications import ConsoleNotifier
from ordering.infrastructure.adapters.payment import MockPaymentCharger
from ordering.infrastructure.adapters.persistence import InMemoryOrderRepository
from ordering.infrastructure.logging import configure_logging
from ordering.settings import (
    AppSettings,
    DatabaseSettings,
    LoggingSettings,
    NotificationSettings,
    PaymentSettings,
    RepositorySettings,
    get_app_settings,
)


logger = logging.getLogger(__name__)


REQUEST = PlaceOrderRequest(
    items=[
        LineItemDTO(name="Python Programming Book", price_cents=4999),
        LineItemDTO(name="Mechanical Keyboard", price_cents=12999),
    ]
)


def print_order(dto: OrderDTO) -> None:
    print(f"   Order ID: {dto.order_id}")
    for item in dto.items:
        print(f"   - {item.name}: {item.price_cents} cents")
    print(f"   Total: {dto.total_display}")


def demo_testing_adapters() -> None:
    """Demo: in-memory adapters, wired by hand."""

    print("\n" + "=" * 80)
    print("DEMO: Configuration #1 - In-Memory Adapters (Testing)")
    print("=" * 80 + "\n")

    repository = InMemoryOrderRepository()
    service = OrderService(
        repository=repository,
        payment_charger=MockPaymentCharger(),
        notifier=ConsoleNotifier(),
    )

    order = service.place_order(REQUEST.to_line_items())

    print("\n📊 RESULTS:")
    print_order(OrderDTO.from_domain(order))
    print(f"   Orders stored: {repository.count()}")


def demo_production_adapters() -> None:
    """Demo: SQL repository, Stripe and SendGrid, selected through settings."""

    print("\n" + "=" * 80)
    print("DEMO: Configuration #2 - External Services (Production)")
    print("=" * 80 + "\n")

    settings = AppSettings(
        repository=RepositorySettings(backend="sqlalchemy"),
        database=DatabaseSettings(url="sqlite+pysqlite:///:memory:"),
        payment=PaymentSettings(gateway="stripe", stripe_api_key="sk_test_demo"),
        notification=NotificationSettings(channel="sendgrid", sendgrid_api_key="SG.demo"),
        logging=LoggingSettings(),
    )
    service = build_order_service(settings)

    order = service.place_order(REQUEST.to_line_items())
    retrieved = service.get_order(order.id)

    print("\n📊 RESULTS:")
    print_order(OrderDTO.from_domain(order))
    if retrieved is not None:
        print(f"   Retrieved: {len(retrieved.items)} items, total {retrieved.total}")


def demo_declined_payment() -> None:
    """Demo: a declined charge stops the placement before storage."""

    print("\n" + "=" * 80)
    print("DEMO: Declined Payment")
    print("=" * 80 + "\n")

    repository = InMemoryOrderRepository()
    notifier = ConsoleNotifier()
    service = OrderService(
        repository=repository,
        payment_charger=MockPaymentCharger(decline=True),
        notifier=notifier,
    )

    try:
        service.place_order(REQUEST.to_line_items())
    except OrderError as e:
        print(f"\n❌ Placement failed: {type(e).__name__}: {e}")

    print(f"   Orders stored: {repository.count()}")
    print(f"   Notifications sent: {len(notifier.sent)}")


def main() -> None:
    """Run all demos."""
    configure_logging(get_app_settings().logging.level)

    print("\n" + "🎬 " * 20)
    print("ORDER PLACEMENT - END-TO-END DEMO")
    print("One use case, interchangeable adapters")
    print("🎬 " * 20 + "\n")

    try:
        demo_testing_adapters()
        demo_production_adapters()
        demo_declined_payment()

        print("\n✅ All demos completed successfully!")

    except OrderError as e:
        logger.error(f"Demo failed: {e}", exc_info=True)
        print(f"\n❌ Demo failed: {e}")


if __name__ == "__main__":
    main()
