"""Pusher-backed notifier, plus a log-only stand-in for unconfigured environments."""

import asyncio
import logging
from typing import Any, Optional

import pusher

from app.config import settings
from app.engine.errors import NotificationError
from app.models.withdrawal import WithdrawalEvent
from app.notifications.base import NotificationResult, Notifier

logger = logging.getLogger("withdrawal_service.notifications")


def build_pusher_client() -> pusher.Pusher:
    return pusher.Pusher(
        app_id=settings.pusher_app_id,
        key=settings.pusher_key,
        secret=settings.pusher_secret,
        cluster=settings.pusher_cluster,
        ssl=True,
        timeout=int(settings.provider_timeout_seconds),
    )


class PusherNotifier(Notifier):
    """
    Triggers one event per withdrawal on a Pusher channel.

    The pusher client is synchronous, so the trigger runs in a worker
    thread to keep the event loop free.
    """

    def __init__(
        self,
        client: Any,
        channel: Optional[str] = None,
        event_name: Optional[str] = None,
    ):
        self._client = client
        self._channel = channel or settings.pusher_channel
        self._event_name = event_name or settings.pusher_event

    async def notify(self, event: WithdrawalEvent) -> NotificationResult:
        try:
            await asyncio.to_thread(
                self._client.trigger,
                self._channel,
                self._event_name,
                event.to_payload(),
            )
        except Exception as e:
            return NotificationResult(
                delivered=False,
                error=NotificationError(f"{type(e).__name__}: {e}", channel=self._channel),
            )
        return NotificationResult(delivered=True)


class LoggingNotifier(Notifier):
    """Used when Pusher credentials are absent: records the event, delivers nothing."""

    async def notify(self, event: WithdrawalEvent) -> NotificationResult:
        logger.info(
            "Notification disabled, not publishing %s (%s)",
            event.transaction_id,
            event.status,
        )
        return NotificationResult(delivered=False)
