"""
Composition root.

The only module that knows both the OrderService and the concrete
adapters. Settings decide which adapter fills each port.
"""
from typing import Optional
import logging

from ordering.application.interfaces import INotifier, IPaymentCharger
from ordering.application.services import OrderService
from ordering.domain.repositories import OrderRepository
from ordering.infrastructure.adapters.notifications import ConsoleNotifier, SendGridNotifier
from ordering.infrastructure.adapters.payment import MockPaymentCharger, StripePaymentCharger
from ordering.infrastructure.adapters.persistence import (
    InMemoryOrderRepository,
    SQLAlchemyOrderRepository,
)
from ordering.infrastructure.database import create_engine, create_schema, get_session_factory
from ordering.infrastructure.logging import configure_logging
from ordering.settings import (
    AppSettings,
    DatabaseSettings,
    NotificationSettings,
    PaymentSettings,
    RepositorySettings,
    get_app_settings,
)


logger = logging.getLogger(__name__)


def build_repository(
    repository_settings: RepositorySettings,
    database_settings: DatabaseSettings,
) -> OrderRepository:
    """Build the configured order repository."""
    if repository_settings.backend == "sqlalchemy":
        engine = create_engine(database_settings)
        create_schema(engine)
        return SQLAlchemyOrderRepository(get_session_factory(engine))
    return InMemoryOrderRepository()


def build_payment_charger(settings: PaymentSettings) -> IPaymentCharger:
    """Build the configured payment charger."""
    if settings.gateway == "stripe":
        return StripePaymentCharger.from_settings(settings)
    return MockPaymentCharger()


def build_notifier(settings: NotificationSettings) -> INotifier:
    """Build the configured notifier."""
    if settings.channel == "sendgrid":
        return SendGridNotifier.from_settings(settings)
    return ConsoleNotifier()


def build_order_service(settings: Optional[AppSettings] = None) -> OrderService:
    """
    Wire an OrderService from settings and apply the configured log level.

    Args:
        settings: Application settings (cached global settings if omitted)

    Returns:
        OrderService with the configured adapters injected
    """
    settings = settings or get_app_settings()
    configure_logging(settings.logging.level)

    logger.info(
        f"Building OrderService: repository={settings.repository.backend}, "
        f"payment={settings.payment.gateway}, "
        f"notification={settings.notification.channel}"
    )

    return OrderService(
        repository=build_repository(settings.repository, settings.database),
        payment_charger=build_payment_charger(settings.payment),
        notifier=build_notifier(settings.notification),
    )
