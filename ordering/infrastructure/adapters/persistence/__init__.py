"""Persistence adapters."""

from .in_memory_order_repository import InMemoryOrderRepository
from .sqlalchemy_order_repository import SQLAlchemyOrderRepository

__all__ = ["InMemoryOrderRepository", "SQLAlchemyOrderRepository"]
