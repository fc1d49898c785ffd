"""Enumerations for the withdrawal domain model."""

from enum import Enum


class WithdrawalMethod(str, Enum):
    """How the funds leave the account."""

    BANK = "bank"
    MPESA = "mpesa"


class PaymentGateway(str, Enum):
    """External payment rails a withdrawal can be routed through."""

    STRIPE = "stripe"  # card network
    FLUTTERWAVE = "flutterwave"  # transfer network


class WithdrawalStatus(str, Enum):
    """Outcome state reported back to the caller."""

    COMPLETED = "completed"
    PROCESSING = "processing"
    FAILED = "failed"

    @classmethod
    def from_provider(cls, raw_status: str | None) -> "WithdrawalStatus":
        """Map a provider-reported status string onto our status set."""
        status = (raw_status or "").strip().lower()
        if status in ("successful", "succeeded", "completed"):
            return cls.COMPLETED
        if status in ("failed", "error", "canceled", "cancelled"):
            return cls.FAILED
        return cls.PROCESSING


class ValidationFailure(str, Enum):
    """Categorized reasons for rejecting a withdrawal request."""

    AMOUNT_TOO_LOW = "amount_too_low"
    AMOUNT_TOO_HIGH = "amount_too_high"
    MISSING_METHOD = "missing_method"
    MISSING_BANK_DETAILS = "missing_bank_details"
    INVALID_PHONE_NUMBER = "invalid_phone_number"


class FailureKind(str, Enum):
    """Which stage of the withdrawal pipeline rejected the request."""

    VALIDATION = "validation"
    PROVIDER = "provider"
