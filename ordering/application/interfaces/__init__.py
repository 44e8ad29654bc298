"""Application layer interfaces."""
from abc import ABC, abstractmethod

from ordering.domain.entities import Order
from ordering.domain.value_objects import Money


class IPaymentCharger(ABC):
    """
    Interface for payment operations.

    This interface defines the contract for charging customers,
    allowing the application layer to take payments without
    depending on a specific provider (Stripe, PayPal, ...).
    """

    @abstractmethod
    def charge(self, amount: Money) -> None:
        """
        Charge the given amount.

        Called exactly once per order placement. A failure is terminal
        for that placement; implementations give no retry guarantee.

        Args:
            amount: Amount to charge, in cents

        Raises:
            PaymentFailed: If the charge was not captured
        """
        pass


class INotifier(ABC):
    """
    Interface for customer notification operations.

    This interface defines the contract for confirming an order to
    the customer, allowing different implementations (email, SMS, ...).
    """

    @abstractmethod
    def notify(self, order: Order) -> None:
        """
        Notify the customer about a placed order.

        Returning means the notification was handed off; there is no
        delivery guarantee beyond that.

        Args:
            order: The placed order

        Raises:
            NotificationFailed: If the notification could not be sent
        """
        pass


__all__ = ["IPaymentCharger", "INotifier"]
