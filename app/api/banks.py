"""
Bank reference list.

GET /banks — Kenyan banks accepted for bank withdrawals, as {code, name}.
"""

from fastapi import APIRouter

router = APIRouter(tags=["reference"])

BANKS: list[dict[str, str]] = [
    {"code": "01", "name": "KCB Bank Kenya"},
    {"code": "02", "name": "Equity Bank"},
    {"code": "03", "name": "Co-operative Bank"},
    {"code": "04", "name": "Absa Bank Kenya"},
    {"code": "05", "name": "Stanbic Bank"},
    {"code": "06", "name": "NCBA Bank"},
    {"code": "07", "name": "Standard Chartered"},
    {"code": "08", "name": "DTB Kenya"},
    {"code": "09", "name": "I&M Bank"},
    {"code": "10", "name": "Family Bank"},
]


@router.get("/banks")
async def list_banks():
    return {"success": True, "banks": BANKS}
