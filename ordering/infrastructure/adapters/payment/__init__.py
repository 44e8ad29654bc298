"""Payment adapters."""

from .mock_payment_charger import MockPaymentCharger
from .stripe_payment_charger import StripePaymentCharger

__all__ = ["MockPaymentCharger", "StripePaymentCharger"]
