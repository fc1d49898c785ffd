"""
Withdrawal orchestrator, the core of the service.

Processes a single withdrawal request end to end:

  1. Validation (amount bounds, method, method-specific fields)
  2. Identifier issue (transaction id + reference)
  3. Fee calculation (flat fee per method, net amount)
  4. Provider execution (exactly one gateway, no fallback)
  5. Notification (best effort; outcome logged, never fatal)

A failure in step 1 or 4 ends the request with ``success=False``; nothing
is retried and no notification is sent. Nothing is persisted either:
every object built here lives for one request only.
"""

import logging
from datetime import datetime, timezone

from app.audit.logger import log_event
from app.config import settings
from app.engine.errors import NotificationError, ProviderError
from app.engine.fees import compute_fees, compute_net_amount
from app.engine.identifiers import generate_reference, generate_transaction_id
from app.engine.validation import validate_withdrawal
from app.models.enums import FailureKind, WithdrawalStatus
from app.models.withdrawal import WithdrawalEvent, WithdrawalRequest, WithdrawalResult
from app.notifications.base import NotificationResult, Notifier
from app.providers.base import RecipientInfo
from app.routing.gateway_selector import GatewayRegistry, resolve_gateway

ESTIMATED_COMPLETION = "Instant to 24 hours"


def _format_amount(amount: float) -> str:
    # Whole amounts drop the ".0"; anything else prints as received, unrounded
    return str(int(amount)) if float(amount).is_integer() else str(amount)


async def process_withdrawal(
    request: WithdrawalRequest,
    gateways: GatewayRegistry,
    notifier: Notifier,
) -> WithdrawalResult:
    """
    Run one withdrawal through validation → routing → execution → notification.

    Args:
        request: The parsed withdrawal body.
        gateways: Adapters for every supported gateway.
        notifier: Real-time event publisher.

    Returns:
        WithdrawalResult. ``failure`` tells the API layer which stage
        rejected the request when ``success`` is False.

    Raises:
        Anything other than ProviderError from the adapter propagates as
        an internal error.
    """
    log_event("withdrawal_received", details={
        "amount": request.amount,
        "method": request.withdrawal_method,
        "payment_method": request.payment_method,
    })

    # Step 1: Validation
    outcome = validate_withdrawal(request)
    if not outcome.valid:
        log_event("validation_failed", details={
            "reason": outcome.reason.value if outcome.reason else "unknown",
            "message": outcome.message,
        })
        return WithdrawalResult(
            success=False,
            message=outcome.message,
            failure=FailureKind.VALIDATION,
        )

    amount = request.amount

    # Step 2: Identifiers
    transaction_id = generate_transaction_id()
    reference = generate_reference()

    # Step 3: Fees
    fees = compute_fees(request.withdrawal_method)
    net_amount = compute_net_amount(amount, fees)

    # Step 4: Provider execution
    gateway = resolve_gateway(request.payment_method)
    provider = gateways.get(gateway)
    log_event("gateway_selected", transaction_id, {
        "gateway": gateway.value,
        "requested": request.payment_method,
        "fees": fees,
        "net_amount": net_amount,
    })

    recipient = RecipientInfo(
        withdrawal_method=request.withdrawal_method,
        account_name=request.account_name,
        account_number=request.account_number,
        phone_number=request.phone_number,
        bank_code=request.bank_code,
    )

    try:
        response = await provider.process(amount, recipient, transaction_id)
    except ProviderError as e:
        log_event("provider_failed", transaction_id, {
            "gateway": gateway.value,
            "error": str(e),
            "status_code": e.status_code,
        }, level=logging.WARNING)
        return WithdrawalResult(
            success=False,
            message=f"Payment processing failed: {e}",
            failure=FailureKind.PROVIDER,
        )

    status = WithdrawalStatus.from_provider(response.status)
    log_event("provider_succeeded", transaction_id, {
        "gateway": gateway.value,
        "payment_id": response.payment_id,
        "provider_status": response.status,
    })

    # Step 5: Notification. A failed publish is logged and dropped.
    event = WithdrawalEvent(
        transaction_id=transaction_id,
        amount=amount,
        method=request.withdrawal_method,
        status=status.value,
        timestamp=datetime.now(timezone.utc).isoformat(),
        account_name=request.account_name,
        reference=reference,
    )
    try:
        notification = await notifier.notify(event)
    except Exception as e:
        notification = NotificationResult(delivered=False, error=NotificationError(str(e)))
    if notification.failed:
        log_event("notification_failed", transaction_id, {
            "error": str(notification.error),
        }, level=logging.WARNING)

    log_event("withdrawal_completed", transaction_id, {
        "gateway": gateway.value,
        "status": status.value,
        "notified": notification.delivered,
    })

    return WithdrawalResult(
        success=True,
        message=f"Withdrawal of {settings.currency} {_format_amount(amount)} processed successfully",
        transaction_id=transaction_id,
        reference=reference,
        fees=fees,
        net_amount=net_amount,
        gateway=gateway,
        payment_details=response.to_details(),
        status=status,
        estimated_completion=ESTIMATED_COMPLETION,
    )
