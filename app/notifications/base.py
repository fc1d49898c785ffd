"""
Real-time notification interface.

Notifiers never raise. They report the outcome as a NotificationResult,
so a failed publish shows up as a value that the orchestrator logs and
then discards.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from app.engine.errors import NotificationError
from app.models.withdrawal import WithdrawalEvent


@dataclass
class NotificationResult:
    delivered: bool
    error: Optional[NotificationError] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class Notifier(ABC):
    """Publishes withdrawal events to subscribed clients."""

    @abstractmethod
    async def notify(self, event: WithdrawalEvent) -> NotificationResult:
        ...
