"""
Illustrative balance endpoint.

GET /balance — Read-only demo balance; withdrawals never change it.
"""

from fastapi import APIRouter, Depends, Query

from app.accounts.balance import BalanceService
from app.dependencies import get_balance_service

router = APIRouter(tags=["balance"])


@router.get("/balance")
async def get_balance(
    account_id: str = Query("demo", description="Account to look up"),
    service: BalanceService = Depends(get_balance_service),
):
    balance = await service.get_balance(account_id)
    return {
        "success": True,
        "accountId": balance.account_id,
        "balance": balance.available,
        "currency": balance.currency,
    }
