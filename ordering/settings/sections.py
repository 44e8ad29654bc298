from __future__ import annotations

from typing import Literal

from pydantic_settings import SettingsConfigDict

from ordering.settings.base import OrderingBaseSettings


class RepositorySettings(OrderingBaseSettings):
    """
    Order storage selection.
    Loaded from .env with prefix ORDERING_REPOSITORY_*
    """

    backend: Literal["memory", "sqlalchemy"] = "memory"

    model_config = SettingsConfigDict(env_prefix="ORDERING_REPOSITORY_")


class DatabaseSettings(OrderingBaseSettings):
    """
    Database connection settings for the SQLAlchemy repository.
    Loaded from .env with prefix ORDERING_DB_*
    """

    url: str = "sqlite+pysqlite:///:memory:"

    # Echo SQL (for debugging)
    echo_sql: bool = False

    model_config = SettingsConfigDict(env_prefix="ORDERING_DB_")


class PaymentSettings(OrderingBaseSettings):
    """
    Payment gateway settings.
    Loaded from .env with prefix ORDERING_PAYMENT_*
    """

    gateway: Literal["mock", "stripe"] = "mock"
    stripe_api_key: str = ""
    currency: str = "usd"

    model_config = SettingsConfigDict(env_prefix="ORDERING_PAYMENT_")


class NotificationSettings(OrderingBaseSettings):
    """
    Customer notification settings.
    Loaded from .env with prefix ORDERING_NOTIFY_*
    """

    channel: Literal["console", "sendgrid"] = "console"
    sendgrid_api_key: str = ""
    from_email: str = "orders@example.com"

    model_config = SettingsConfigDict(env_prefix="ORDERING_NOTIFY_")


class LoggingSettings(OrderingBaseSettings):
    """
    Logging settings.
    Loaded from .env with prefix ORDERING_LOG_*
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = SettingsConfigDict(env_prefix="ORDERING_LOG_")
