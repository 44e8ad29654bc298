"""
SQLAlchemy ORM Models.

Maps domain entities to database tables.
"""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import declarative_base, relationship


Base = declarative_base()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# ORDER MODEL
# =============================================================================

class OrderModel(Base):
    """
    Order database model.

    The primary key is the domain OrderId, not a surrogate key.
    """

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=False)

    # Denormalized total, in cents
    total_amount = Column(Integer, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=_utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utc_now, onupdate=_utc_now, nullable=False)

    # Relationships
    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, total_amount={self.total_amount})>"


# =============================================================================
# ORDER ITEM MODEL
# =============================================================================

class OrderItemModel(Base):
    """
    Order item database model.

    ``position`` keeps the line items in the order they were placed.
    """

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Foreign key
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)

    position = Column(Integer, nullable=False)
    name = Column(String(500), nullable=False)
    price_amount = Column(Integer, nullable=False)

    # Relationships
    order = relationship("OrderModel", back_populates="items")

    __table_args__ = (
        Index("ix_order_items_order_position", "order_id", "position"),
    )

    def __repr__(self):
        return f"<OrderItemModel(order_id={self.order_id}, position={self.position}, name={self.name})>"
