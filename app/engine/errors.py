"""
Error taxonomy for withdrawal processing.

  - ProviderError      upstream payment API failed; returned to the caller as 400
  - NotificationError  real-time publish failed; logged, never propagated

Validation failures are not exceptions: the validator returns a
ValidationOutcome (see app.engine.validation). Anything else that escapes
the orchestrator is an internal error and is handled by the app-level
exception handler (HTTP 500, generic message).
"""

from typing import Optional


class ProviderError(Exception):
    """
    A payment provider call failed.

    The message is returned to API clients, so adapters must only put
    sanitized text in it. Raw upstream payloads belong in the logs.
    """

    def __init__(self, message: str, status_code: int = 502, gateway: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.gateway = gateway


class NotificationError(Exception):
    """Publishing a withdrawal event to the real-time backplane failed."""

    def __init__(self, message: str, channel: Optional[str] = None):
        super().__init__(message)
        self.channel = channel
