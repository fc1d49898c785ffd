from app.models.enums import (
    FailureKind,
    PaymentGateway,
    ValidationFailure,
    WithdrawalMethod,
    WithdrawalStatus,
)
from app.models.withdrawal import WithdrawalEvent, WithdrawalRequest, WithdrawalResult

__all__ = [
    "FailureKind",
    "PaymentGateway",
    "ValidationFailure",
    "WithdrawalMethod",
    "WithdrawalStatus",
    "WithdrawalEvent",
    "WithdrawalRequest",
    "WithdrawalResult",
]
