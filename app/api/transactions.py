"""
Transaction history placeholders.

The service does not persist withdrawals; these endpoints exist so clients
get an explicit answer instead of a 404.

GET    /transactions        — Always empty.
GET    /transaction/{id}    — Always "not stored".
DELETE /transactions/clear  — No-op.
"""

from fastapi import APIRouter

router = APIRouter(tags=["transactions"])

NOT_PERSISTED = "Transactions are not persisted in this system"


@router.get("/transactions")
async def list_transactions():
    return {
        "success": True,
        "count": 0,
        "transactions": [],
        "message": NOT_PERSISTED,
    }


@router.get("/transaction/{transaction_id}")
async def get_transaction(transaction_id: str):
    return {
        "success": False,
        "message": "Transaction history is not stored in this system",
    }


@router.delete("/transactions/clear")
async def clear_transactions():
    return {"success": True, "message": "Transactions are not stored in this system"}
