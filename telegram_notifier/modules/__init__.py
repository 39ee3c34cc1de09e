"""Notification modules for telegram_notifier."""

from telegram_notifier.modules.base import (
    NotificationEvent,
    NotificationModule,
    SettingField,
)
from telegram_notifier.modules.telegram import TelegramNotification

# Module name to class mapping
MODULES = {
    "telegram": TelegramNotification,
}


def get_module(name: str) -> type[NotificationModule]:
    """Get notification module class by name.

    Args:
        name: The module name.

    Returns:
        The module class.

    Raises:
        ValueError: If the module is not supported.
    """
    module_class = MODULES.get(name)
    if not module_class:
        raise ValueError(f"Unknown notification module: {name}")
    return module_class


__all__ = [
    "NotificationEvent",
    "NotificationModule",
    "SettingField",
    "TelegramNotification",
    "MODULES",
    "get_module",
]
