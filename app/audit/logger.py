"""
Audit trail for withdrawal processing.

Every step of a withdrawal gets one structured log line with:
  - Transaction ID (once issued; validation failures have none)
  - Action (what happened)
  - Details (amounts, gateway, failure reasons)

Nothing is persisted: the log stream is the only record of a withdrawal,
so entries must carry enough context to trace a request end to end.
Secrets and raw provider payloads never go into details.
"""

import json
import logging
from typing import Any, Optional

logger = logging.getLogger("withdrawal_service.audit")


def log_event(
    action: str,
    transaction_id: Optional[str] = None,
    details: Optional[dict[str, Any]] = None,
    level: int = logging.INFO,
) -> dict[str, Any]:
    """
    Emit an audit log entry.

    Args:
        action: What happened (e.g. "validation_failed", "gateway_selected").
        transaction_id: The withdrawal this event relates to, if issued yet.
        details: Arbitrary JSON-serializable context.
        level: Logging level for the entry.

    Returns:
        The entry as a dict (handy for tests and callers that forward it).
    """
    entry = {
        "action": action,
        "transaction_id": transaction_id,
        "details": details or {},
    }
    logger.log(
        level,
        "AUDIT | txn=%s action=%s | %s",
        transaction_id or "-",
        action,
        json.dumps(details, default=str)[:500] if details else "",
    )
    return entry
