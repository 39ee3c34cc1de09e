"""Telegram notifier exception hierarchy."""

from __future__ import annotations


class TelegramNotifierError(Exception):
    """Base exception for all telegram_notifier errors."""


class ConfigError(TelegramNotifierError):
    """Invalid configuration or missing module settings."""


class DeliveryError(TelegramNotifierError):
    """A notification could not be delivered to the Bot API."""
