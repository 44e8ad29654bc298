"""
Stripe Payment Charger Implementation.

Simulates the Stripe charges API: the request is built and logged the
way the real call would send it, but nothing goes over the network.
Stripe amounts are in the smallest currency unit, same as Money.
"""
from typing import Any, Dict, List
import logging

from ordering.application.interfaces import IPaymentCharger
from ordering.domain.errors import PaymentFailed
from ordering.domain.value_objects import Money
from ordering.settings import PaymentSettings


logger = logging.getLogger(__name__)


class StripePaymentCharger(IPaymentCharger):
    """
    Simulated Stripe implementation of payment charger.
    """

    CHARGES_ENDPOINT = "https://api.stripe.com/v1/charges"

    def __init__(self, api_key: str, currency: str = "usd", source: str = "tok_visa"):
        """
        Initialize Stripe payment charger.

        Args:
            api_key: Stripe secret key
            currency: ISO currency code sent with every charge
            source: Payment source token
        """
        self.api_key = api_key
        self.currency = currency.lower()
        self.source = source
        self.requests: List[Dict[str, Any]] = []
        logger.info("StripePaymentCharger initialized")

    @classmethod
    def from_settings(cls, settings: PaymentSettings) -> "StripePaymentCharger":
        return cls(api_key=settings.stripe_api_key, currency=settings.currency)

    def charge(self, amount: Money) -> None:
        """
        Charge a customer via Stripe.

        Args:
            amount: Amount to charge

        Raises:
            PaymentFailed: If no API key is configured
        """
        if not self.api_key:
            logger.error("Stripe api_key not configured, cannot charge")
            raise PaymentFailed("Stripe API key not configured")

        payload = {
            "amount": amount.amount,
            "currency": self.currency,
            "source": self.source,
        }
        self.requests.append(payload)

        logger.info(f"[Stripe API] POST {self.CHARGES_ENDPOINT} amount={amount}")
