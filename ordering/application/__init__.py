"""Application layer - services, interfaces, and DTOs."""

from .dtos import LineItemDTO, OrderDTO, PlaceOrderRequest
from .interfaces import INotifier, IPaymentCharger
from .services import OrderService

__all__ = [
    # DTOs
    "LineItemDTO",
    "OrderDTO",
    "PlaceOrderRequest",
    # Services
    "OrderService",
    # Interfaces
    "INotifier",
    "IPaymentCharger",
]
