"""Configuration data classes."""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from telegram_notifier.exceptions import ConfigError

logger = logging.getLogger("telegram_notifier")

# Older installs stored the chat id under "chatid".
CHAT_ID_KEYS = ("chatId", "chatid", "chat_id")


@dataclass
class ModuleSettings:
    """Account-level settings entered by an administrator."""
    token: str
    chat_id: str

    @classmethod
    def from_dict(cls, raw: "Mapping[str, Any]") -> "ModuleSettings":
        """Build settings from the host's stored values.

        Raises:
            ConfigError: If raw is not a mapping or a value is missing.
        """
        if not isinstance(raw, Mapping):
            raise ConfigError(
                f"Module settings must be a mapping, got {type(raw).__name__}"
            )

        # Surrounding whitespace is never part of a token or chat id
        token = raw.get("token")
        if isinstance(token, str):
            token = token.strip()
        chat_ids = (str(raw[key]).strip() for key in CHAT_ID_KEYS if raw.get(key) is not None)
        chat_id = next((value for value in chat_ids if value), "")

        if not token or not isinstance(token, str):
            raise ConfigError("Telegram token is required")
        if not chat_id:
            raise ConfigError("Telegram chatId is required")

        logger.debug("Parsed Telegram module settings")
        return cls(token=token, chat_id=chat_id)

    def to_dict(self) -> dict:
        """Return settings keyed the way the host stores them."""
        return {"token": self.token, "chatId": self.chat_id}


@dataclass
class LoggingConfig:
    """Log output settings."""
    level: str = "INFO"
    path: Optional[str] = None


@dataclass
class Config:
    """Top-level configuration."""
    module: ModuleSettings
    logging: LoggingConfig = field(default_factory=LoggingConfig)
