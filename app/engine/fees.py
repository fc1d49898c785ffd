"""Flat withdrawal fees, in the same unit as the request amount."""

from typing import Optional

from app.models.enums import WithdrawalMethod

BANK_FEE = 50
MOBILE_MONEY_FEE = 25


def compute_fees(method: Optional[str]) -> float:
    """Bank transfers cost 50; M-Pesa and anything else cost 25."""
    if method == WithdrawalMethod.BANK.value:
        return BANK_FEE
    return MOBILE_MONEY_FEE


def compute_net_amount(amount: float, fee: float) -> float:
    # Not floored at zero: small amounts can net out negative.
    return amount - fee
