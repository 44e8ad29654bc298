# Settings package
from ordering.settings.app_settings import AppSettings, get_app_settings
from ordering.settings.sections import (
    DatabaseSettings,
    LoggingSettings,
    NotificationSettings,
    PaymentSettings,
    RepositorySettings,
)

__all__ = [
    "AppSettings",
    "get_app_settings",
    "DatabaseSettings",
    "LoggingSettings",
    "NotificationSettings",
    "PaymentSettings",
    "RepositorySettings",
]
