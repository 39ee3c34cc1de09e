"""Telegram notification module."""

import logging
import re

import httpx

from telegram_notifier.config_schema import ModuleSettings
from telegram_notifier.exceptions import DeliveryError
from telegram_notifier.modules.base import NotificationModule, SettingField

logger = logging.getLogger("telegram_notifier")

# Matches the token path segment, raw or percent-encoded.
BOT_PATH_PATTERN = re.compile(r"""/bot[^/\s'"]+""")


def _redact(text: str, token: str) -> str:
    """Mask the bot token in an error message."""
    return BOT_PATH_PATTERN.sub("/bot***", text).replace(token, "***")


class TelegramNotification(NotificationModule):
    """Delivers notifications as Telegram Bot API messages."""

    TELEGRAM_API_BASE = "https://api.telegram.org"

    def __init__(self):
        self.set_display_name("Telegram").set_logo_file_name("telegram_logo.png")

    def settings(self) -> "dict[str, SettingField]":
        return {
            "token": SettingField(
                friendly_name="Token",
                type="text",
                description='Obtain from <a href="https://telegram.me/BotFather">BotFather</a>',
                placeholder="Token",
            ),
            "chatId": SettingField(
                friendly_name="Chat ID",
                type="text",
                description="Chat ID",
                placeholder="Chat ID",
            ),
        }

    def test_connection(self, settings) -> bool:
        """Accept any settings; nothing is verified against the Bot API."""
        return True

    def notification_settings(self) -> "dict[str, SettingField]":
        """Rules carry no Telegram specific settings."""
        return {}

    def get_dynamic_field(self, field_name: str, settings) -> list:
        return []

    def send_notification(self, notification, module_settings, notification_settings) -> None:
        """Send the notification message and URL to the configured chat.

        Args:
            notification: Object exposing get_message() and get_url().
            module_settings: ModuleSettings or the host's stored mapping
                with 'token' and 'chatId'.
            notification_settings: Ignored.

        Raises:
            ConfigError: If token or chatId is missing.
            DeliveryError: If the request is malformed, fails, or the API
                returns an error status.
        """
        if not isinstance(module_settings, ModuleSettings):
            module_settings = ModuleSettings.from_dict(module_settings)

        text = f"{notification.get_message()} {notification.get_url() or ''}"

        url = f"{self.TELEGRAM_API_BASE}/bot{module_settings.token}/sendMessage"
        params = {
            "chat_id": module_settings.chat_id,
            "text": text,
        }

        try:
            with httpx.Client() as client:
                response = client.get(url, params=params)
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # httpx error messages include the request URL, token included
            reason = _redact(str(e), module_settings.token)
            logger.error(f"Telegram notification to chat {module_settings.chat_id} failed: {reason}")
            raise DeliveryError(f"Telegram API request failed: {reason}") from e

        logger.info(f"Telegram notification sent to chat {module_settings.chat_id}")
