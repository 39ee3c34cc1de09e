"""Telegram notifier - Telegram notification module for billing notification rules."""

__description__ = "Telegram notification module."
__author__ = "telegram_notifier contributors"
__version__ = "0.1.0"
