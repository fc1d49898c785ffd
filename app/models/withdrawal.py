"""Request and result types for a single withdrawal."""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, Field

from app.models.enums import FailureKind, PaymentGateway, WithdrawalStatus


class WithdrawalRequest(BaseModel):
    """
    Incoming withdrawal body.

    Every field is optional and methods are plain strings; categorized
    rejection happens in app.engine.validation.
    """

    amount: Optional[float] = Field(None, allow_inf_nan=False)
    withdrawal_method: Optional[str] = Field(None, alias="withdrawalMethod")
    payment_method: Optional[str] = Field(None, alias="paymentMethod")
    account_name: Optional[str] = Field(None, alias="accountName")
    account_number: Optional[str] = Field(None, alias="accountNumber")
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    bank_code: Optional[str] = Field(None, alias="bankCode")

    model_config = {"populate_by_name": True}


@dataclass
class WithdrawalResult:
    """Outcome of one pass through the orchestrator."""

    success: bool
    message: str
    transaction_id: Optional[str] = None
    reference: Optional[str] = None
    fees: Optional[float] = None
    net_amount: Optional[float] = None
    gateway: Optional[PaymentGateway] = None
    payment_details: Optional[dict[str, Any]] = None
    status: Optional[WithdrawalStatus] = None
    estimated_completion: Optional[str] = None
    failure: Optional[FailureKind] = None


@dataclass
class WithdrawalEvent:
    """Payload published to real-time subscribers after a successful withdrawal."""

    transaction_id: str
    amount: float
    method: Optional[str]
    status: str
    timestamp: str  # ISO-8601, UTC
    account_name: Optional[str]
    reference: str

    def to_payload(self) -> dict[str, Any]:
        return {
            "transactionId": self.transaction_id,
            "amount": self.amount,
            "method": self.method,
            "status": self.status,
            "timestamp": self.timestamp,
            "accountName": self.account_name,
            "reference": self.reference,
        }
