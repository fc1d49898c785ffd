"""
Payment gateway routing.

Maps the caller's ``paymentMethod`` onto one of the closed set of gateways
and hands back the adapter registered for it:

  - "stripe"                      → card network (Stripe)
  - anything else, including None → transfer network (Flutterwave)

The transfer network is the default rail; there is no fallback between
gateways once one has been chosen.
"""

from collections.abc import Mapping
from typing import Optional

from app.models.enums import PaymentGateway
from app.providers.base import PaymentProvider

DEFAULT_GATEWAY = PaymentGateway.FLUTTERWAVE


def resolve_gateway(payment_method: Optional[str]) -> PaymentGateway:
    """
    Select the gateway for a withdrawal.

    Args:
        payment_method: Raw ``paymentMethod`` from the request. Matching is
            exact; unknown or missing values route to the default gateway.

    Returns:
        The PaymentGateway to invoke.
    """
    if payment_method == PaymentGateway.STRIPE.value:
        return PaymentGateway.STRIPE
    return DEFAULT_GATEWAY


class GatewayRegistry:
    """One adapter per gateway, looked up by enum member."""

    def __init__(self, providers: Mapping[PaymentGateway, PaymentProvider]):
        missing = set(PaymentGateway) - set(providers)
        if missing:
            raise ValueError(
                "No provider registered for: " + ", ".join(sorted(g.value for g in missing))
            )
        self._providers = dict(providers)

    @classmethod
    def of(cls, *providers: PaymentProvider) -> "GatewayRegistry":
        return cls({p.gateway: p for p in providers})

    def get(self, gateway: PaymentGateway) -> PaymentProvider:
        return self._providers[gateway]
