"""
Abstract payment provider interface.

Both gateways (Stripe for the card network, Flutterwave for bank and
mobile-money transfers) implement this interface. Each adapter wraps one
upstream API call and normalizes the result into a ProviderResponse the
orchestrator can turn into a withdrawal result.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from app.models.enums import PaymentGateway


@dataclass
class RecipientInfo:
    """Who receives the funds."""

    withdrawal_method: Optional[str]
    account_name: Optional[str] = None
    account_number: Optional[str] = None
    phone_number: Optional[str] = None
    bank_code: Optional[str] = None


@dataclass
class ProviderResponse:
    """Normalized result of a provider call."""

    gateway: PaymentGateway
    payment_id: Optional[str]  # payment intent id or transfer id
    status: str  # as reported by the provider
    reference: Optional[str] = None
    client_secret: Optional[str] = None  # card network only

    def to_details(self) -> dict[str, Any]:
        """Gateway-specific ``paymentDetails`` block for the API response."""
        if self.gateway == PaymentGateway.STRIPE:
            return {
                "gateway": self.gateway.value,
                "paymentId": self.payment_id,
                "status": self.status,
                "clientSecret": self.client_secret,
            }
        return {
            "gateway": self.gateway.value,
            "transferId": self.payment_id,
            "status": self.status,
            "reference": self.reference,
        }


class PaymentProvider(ABC):
    """Abstract base class for payment providers."""

    @property
    @abstractmethod
    def gateway(self) -> PaymentGateway:
        """Which gateway this adapter talks to."""
        ...

    @abstractmethod
    async def process(
        self,
        amount: float,
        recipient: RecipientInfo,
        transaction_id: str,
    ) -> ProviderResponse:
        """
        Submit the withdrawal to the provider.

        Raises:
            ProviderError: On any upstream failure (network error, timeout,
                non-2xx response, malformed payload).
        """
        ...
