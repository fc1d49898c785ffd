"""
Card-network adapter backed by the Stripe Payment Intents API.

Creates a payment intent for the withdrawal amount through the official
Stripe SDK and hands back the intent id and client secret so the client
can continue the flow. Stripe expects amounts in the smallest currency unit.
"""

import logging
from typing import Optional

import stripe

from app.config import settings
from app.engine.errors import ProviderError
from app.models.enums import PaymentGateway, WithdrawalStatus
from app.providers.base import PaymentProvider, ProviderResponse, RecipientInfo

logger = logging.getLogger("withdrawal_service.providers.stripe")


def _minor_units(amount: float) -> int:
    """Convert a major-unit amount to minor units, avoiding floating point issues."""
    return int(round(amount * 100))


def build_stripe_client() -> stripe.StripeClient:
    """Async-capable Stripe client; the adapter never retries."""
    return stripe.StripeClient(
        api_key=settings.stripe_secret_key,
        base_addresses={"api": settings.stripe_api_base},
        http_client=stripe.HTTPXClient(timeout=settings.provider_timeout_seconds),
        max_network_retries=0,
    )


class StripeProvider(PaymentProvider):
    def __init__(self, client: stripe.StripeClient, currency: Optional[str] = None):
        self._client = client
        self._currency = (currency or settings.currency).lower()

    @property
    def gateway(self) -> PaymentGateway:
        return PaymentGateway.STRIPE

    async def process(
        self,
        amount: float,
        recipient: RecipientInfo,
        transaction_id: str,
    ) -> ProviderResponse:
        params = {
            "amount": _minor_units(amount),
            "currency": self._currency,
            "description": f"Withdrawal {transaction_id} for {recipient.account_name}",
            "metadata": {
                "transactionId": transaction_id,
                "withdrawalMethod": recipient.withdrawal_method or "",
            },
        }

        try:
            intent = await self._client.v1.payment_intents.create_async(params=params)
        except stripe.APIConnectionError as e:
            logger.error("Stripe request failed for %s: %s", transaction_id, type(e).__name__)
            raise ProviderError("Stripe error: could not reach payment provider", gateway="stripe") from e
        except stripe.StripeError as e:
            # user_message is Stripe's customer-facing text and never carries the key
            logger.error("Stripe rejected %s (HTTP %s): %s", transaction_id, e.http_status, e.user_message)
            raise ProviderError(
                f"Stripe error: {e.user_message or type(e).__name__}",
                status_code=e.http_status or 502,
                gateway="stripe",
            ) from e

        intent_id = getattr(intent, "id", None)
        if not intent_id:
            raise ProviderError("Stripe error: malformed response", gateway="stripe")

        logger.info("Stripe payment intent created: %s", intent_id)

        return ProviderResponse(
            gateway=self.gateway,
            payment_id=intent_id,
            status=WithdrawalStatus.PROCESSING.value,
            reference=transaction_id,
            client_secret=getattr(intent, "client_secret", None),
        )
