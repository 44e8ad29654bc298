"""Database infrastructure."""

from .config import create_engine, create_schema, get_session_factory
from .models import Base, OrderItemModel, OrderModel

__all__ = [
    "Base",
    "OrderItemModel",
    "OrderModel",
    "create_engine",
    "create_schema",
    "get_session_factory",
]
