from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from ordering.settings.sections import (
    DatabaseSettings,
    LoggingSettings,
    NotificationSettings,
    PaymentSettings,
    RepositorySettings,
)


class AppSettings(BaseModel):
    """
    Application settings aggregator.

    Each section reads its own environment prefix; this model only
    groups them so the composition root gets a single object.
    """

    model_config = ConfigDict(extra="ignore")

    repository: RepositorySettings
    database: DatabaseSettings
    payment: PaymentSettings
    notification: NotificationSettings
    logging: LoggingSettings

    @classmethod
    def load(cls) -> "AppSettings":
        """Load every section from the environment (no caching)."""
        return cls(
            repository=RepositorySettings(),
            database=DatabaseSettings(),
            payment=PaymentSettings(),
            notification=NotificationSettings(),
            logging=LoggingSettings(),
        )


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings.load()
