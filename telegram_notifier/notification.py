"""Standalone notification event."""

from dataclasses import dataclass

from telegram_notifier.modules.base import NotificationEvent


@dataclass
class Notification(NotificationEvent):
    """Notification built outside the host, e.g. from the command line."""
    message: str
    url: str = ""

    def get_message(self) -> str:
        return self.message

    def get_url(self) -> str:
        return self.url
