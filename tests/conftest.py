"""Shared test fixtures for telegram_notifier tests."""

import pytest

from telegram_notifier.config_schema import ModuleSettings
from telegram_notifier.modules.telegram import TelegramNotification
from telegram_notifier.notification import Notification


@pytest.fixture
def module():
    """Create a TelegramNotification instance."""
    return TelegramNotification()


@pytest.fixture
def module_settings():
    """Settings as the host stores them."""
    return {"token": "T", "chatId": "C"}


@pytest.fixture
def parsed_settings():
    """Parsed module settings."""
    return ModuleSettings(token="T", chat_id="C")


@pytest.fixture
def invoice_notification():
    """Notification fired by an invoice rule."""
    return Notification(
        message="Invoice Created",
        url="https://example.com/invoice/1",
    )
