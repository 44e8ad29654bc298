"""
Mock Payment Charger Implementation.

This simulates payments for testing and demos. No money moves.
"""
from typing import List
import logging

from ordering.application.interfaces import IPaymentCharger
from ordering.domain.errors import PaymentFailed
from ordering.domain.value_objects import Money


logger = logging.getLogger(__name__)


class MockPaymentCharger(IPaymentCharger):
    """
    Mock implementation of payment charger.

    Records charged amounts instead of calling a provider. Built with
    ``decline=True`` it refuses every charge, which exercises the
    payment failure path without a real gateway.
    """

    def __init__(self, decline: bool = False):
        """
        Initialize mock payment charger.

        Args:
            decline: Refuse every charge with PaymentFailed
        """
        self.decline = decline
        self.charges: List[Money] = []
        logger.info(f"MockPaymentCharger initialized (decline={decline})")

    def charge(self, amount: Money) -> None:
        """
        Simulate a charge.

        Args:
            amount: Amount to charge

        Raises:
            PaymentFailed: If the charger was built to decline
        """
        if self.decline:
            logger.error(f"[Mock] Charge of {amount} declined")
            raise PaymentFailed(f"Charge of {amount} declined")

        self.charges.append(amount)
        logger.info(f"[Mock] Charging {amount}")

    def clear(self) -> None:
        """Clear recorded charges (for testing)."""
        self.charges.clear()
