"""
Account balance lookup.

The service keeps no ledger, so balances are informational only: a
withdrawal never reads or decrements them. The balance source is
injected through ``get_balance_service`` so it can be swapped per
environment or mocked in tests, instead of living in module-level state.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from app.config import settings

DEMO_BALANCE = 50_000.0


@dataclass(frozen=True)
class AccountBalance:
    account_id: str
    available: float
    currency: str


class BalanceService(ABC):
    @abstractmethod
    async def get_balance(self, account_id: str) -> AccountBalance:
        ...


class DemoBalanceService(BalanceService):
    """Returns the same illustrative balance for every account."""

    def __init__(self, amount: float = DEMO_BALANCE, currency: Optional[str] = None):
        self._amount = amount
        self._currency = currency or settings.currency

    async def get_balance(self, account_id: str) -> AccountBalance:
        return AccountBalance(account_id=account_id, available=self._amount, currency=self._currency)
