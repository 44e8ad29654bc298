"""
Database configuration.

Manages engine and session factory creation.
"""
from typing import Optional
import logging

from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ordering.infrastructure.database.models import Base
from ordering.settings import DatabaseSettings


logger = logging.getLogger(__name__)


# =============================================================================
# ENGINE CREATION
# =============================================================================

def create_engine(settings: Optional[DatabaseSettings] = None) -> Engine:
    """
    Create SQLAlchemy engine.

    In-memory SQLite databases live inside a single connection, so they
    get a StaticPool shared by every session.

    Args:
        settings: Database settings (loaded from environment if omitted)

    Returns:
        Configured engine
    """
    settings = settings or DatabaseSettings()
    logger.info(f"Creating database engine: {settings.url}")

    if settings.url.startswith("sqlite") and ":memory:" in settings.url:
        return sa_create_engine(
            settings.url,
            echo=settings.echo_sql,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return sa_create_engine(
        settings.url,
        echo=settings.echo_sql,
        pool_pre_ping=True,  # Test connections before using
    )


def create_schema(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(engine)
    logger.info("Database schema ready")


# =============================================================================
# SESSION FACTORY
# =============================================================================

def get_session_factory(engine: Engine) -> sessionmaker:
    """
    Get session factory.

    Args:
        engine: Engine the sessions bind to

    Returns:
        Session factory for creating sessions
    """
    return sessionmaker(
        bind=engine,
        class_=Session,
        expire_on_commit=False,
        autoflush=False,
    )
