from app.notifications.base import NotificationResult, Notifier
from app.notifications.pusher_notifier import LoggingNotifier, PusherNotifier

__all__ = ["LoggingNotifier", "NotificationResult", "Notifier", "PusherNotifier"]
