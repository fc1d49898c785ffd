"""
Withdrawal endpoint.

POST /withdraw — Validate a withdrawal, route it to a payment gateway and
                 report the outcome.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.dependencies import get_gateway_registry, get_notifier
from app.engine.orchestrator import process_withdrawal
from app.models.withdrawal import WithdrawalRequest, WithdrawalResult
from app.notifications.base import Notifier
from app.routing.gateway_selector import GatewayRegistry

router = APIRouter(tags=["withdrawals"])


class WithdrawalResponse(BaseModel):
    success: bool
    message: str
    transaction_id: Optional[str] = Field(None, serialization_alias="transactionId")
    reference: Optional[str] = None
    payment_gateway: Optional[str] = Field(None, serialization_alias="paymentGateway")
    fees: Optional[float] = None
    net_amount: Optional[float] = Field(None, serialization_alias="netAmount")
    estimated_completion: Optional[str] = Field(None, serialization_alias="estimatedCompletion")
    status: Optional[str] = None
    payment_details: Optional[dict[str, Any]] = Field(None, serialization_alias="paymentDetails")


def _result_to_response(result: WithdrawalResult) -> WithdrawalResponse:
    return WithdrawalResponse(
        success=result.success,
        message=result.message,
        transaction_id=result.transaction_id,
        reference=result.reference,
        payment_gateway=result.gateway.value if result.gateway else None,
        fees=result.fees,
        net_amount=result.net_amount,
        estimated_completion=result.estimated_completion,
        status=result.status.value if result.status else None,
        payment_details=result.payment_details,
    )


@router.post("/withdraw")
async def create_withdrawal(
    body: WithdrawalRequest,
    gateways: GatewayRegistry = Depends(get_gateway_registry),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Process a withdrawal.

    Validation and provider failures return 400 with ``{success, message}``.
    Nothing is stored, so resubmitting the same body creates a new withdrawal.
    """
    result = await process_withdrawal(body, gateways, notifier)
    response = _result_to_response(result)
    return JSONResponse(
        status_code=200 if result.success else 400,
        content=response.model_dump(mode="json", by_alias=True, exclude_none=True),
    )
