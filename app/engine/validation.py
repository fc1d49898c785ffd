"""
Withdrawal request validation with categorized failure reasons.

Before any identifiers are issued or a provider is contacted, we verify:
  1. Amount is present and at least the minimum
  2. Amount does not exceed the maximum
  3. Withdrawal method is bank or mpesa
  4. Bank withdrawals carry an account name and number
  5. M-Pesa withdrawals carry a 10-digit phone number

Checks run in that order and the first failure wins. Each returns a
structured outcome so the orchestrator (and tests) can branch on the
reason rather than parse the message.
"""

import math
import re
from dataclasses import dataclass
from typing import Optional

from app.config import settings
from app.models.enums import ValidationFailure, WithdrawalMethod
from app.models.withdrawal import WithdrawalRequest


MIN_WITHDRAWAL_AMOUNT = 100
MAX_WITHDRAWAL_AMOUNT = 1_000_000

ALLOWED_METHODS = {m.value for m in WithdrawalMethod}

PHONE_NUMBER_PATTERN = re.compile(r"^[0-9]{10}$")


@dataclass
class ValidationOutcome:
    """Result of validating a withdrawal request."""

    valid: bool
    reason: Optional[ValidationFailure] = None
    message: str = ""


def _fail(reason: ValidationFailure, message: str) -> ValidationOutcome:
    return ValidationOutcome(valid=False, reason=reason, message=message)


def validate_withdrawal(request: WithdrawalRequest) -> ValidationOutcome:
    """
    Check whether a withdrawal request may be processed.

    Args:
        request: The parsed withdrawal body.

    Returns:
        ValidationOutcome indicating pass/fail with a categorized reason
        and a message suitable for the API response.
    """
    amount = request.amount

    # Missing or NaN amounts are reported as below the minimum; infinities
    # fall through to the ordinary bound checks
    if amount is None or math.isnan(amount) or amount < MIN_WITHDRAWAL_AMOUNT:
        return _fail(
            ValidationFailure.AMOUNT_TOO_LOW,
            f"Amount must be at least {settings.currency} {MIN_WITHDRAWAL_AMOUNT:,}",
        )

    if amount > MAX_WITHDRAWAL_AMOUNT:
        return _fail(
            ValidationFailure.AMOUNT_TOO_HIGH,
            f"Amount cannot exceed {settings.currency} {MAX_WITHDRAWAL_AMOUNT:,}",
        )

    method = request.withdrawal_method
    if method not in ALLOWED_METHODS:
        return _fail(
            ValidationFailure.MISSING_METHOD,
            "Withdrawal method must be one of: bank, mpesa",
        )

    if method == WithdrawalMethod.BANK.value:
        if not _present(request.account_number) or not _present(request.account_name):
            return _fail(
                ValidationFailure.MISSING_BANK_DETAILS,
                "Account name and account number are required for bank withdrawals",
            )

    if method == WithdrawalMethod.MPESA.value:
        if not request.phone_number or not PHONE_NUMBER_PATTERN.fullmatch(request.phone_number):
            return _fail(
                ValidationFailure.INVALID_PHONE_NUMBER,
                "A valid 10-digit phone number is required for M-Pesa withdrawals",
            )

    return ValidationOutcome(valid=True)


def _present(value: Optional[str]) -> bool:
    return bool(value and value.strip())
