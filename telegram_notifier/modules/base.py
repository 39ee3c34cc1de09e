"""Base notification module interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

# Form field types the host UI knows how to render.
FIELD_TYPES = ("text", "password", "textarea", "yesno", "system", "dynamic")


@dataclass
class SettingField:
    """Describes one configurable field in the host settings form."""
    friendly_name: str
    type: str
    description: str
    placeholder: Optional[str] = None
    required: bool = False

    def __post_init__(self):
        if self.type not in FIELD_TYPES:
            raise ValueError(f"Unknown setting field type: {self.type}")

    def to_dict(self) -> dict:
        """Render the field descriptor with the host's keys."""
        rendered = {
            "FriendlyName": self.friendly_name,
            "Type": self.type,
            "Description": self.description,
        }
        if self.placeholder is not None:
            rendered["Placeholder"] = self.placeholder
        if self.required:
            rendered["Required"] = True
        return rendered


class NotificationEvent(ABC):
    """A triggered notification handed over by the host."""

    @abstractmethod
    def get_message(self) -> str:
        """Return the human-readable message body."""
        raise NotImplementedError

    @abstractmethod
    def get_url(self) -> str:
        """Return the reference URL, or an empty string."""
        raise NotImplementedError


class NotificationModule(ABC):
    """Abstract base class for notification modules.

    The host builds its configuration UI from ``settings()`` and
    ``notification_settings()``, validates admin input with
    ``test_connection()`` and calls ``send_notification()`` when a
    notification rule fires.
    """

    _display_name: str = ""
    _logo_file_name: Optional[str] = None

    def set_display_name(self, name: str) -> "NotificationModule":
        self._display_name = name
        return self

    def set_logo_file_name(self, file_name: str) -> "NotificationModule":
        self._logo_file_name = file_name
        return self

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def logo_file_name(self) -> Optional[str]:
        return self._logo_file_name

    def get_logo_path(self) -> Optional[str]:
        """Return the logo path relative to the module assets, if any."""
        if not self._logo_file_name:
            return None
        return f"assets/{self._logo_file_name}"

    def settings_form(self) -> dict:
        """Render ``settings()`` for the host configuration UI."""
        return {key: f.to_dict() for key, f in self.settings().items()}

    def notification_settings_form(self) -> dict:
        """Render ``notification_settings()`` for the host rule editor."""
        return {key: f.to_dict() for key, f in self.notification_settings().items()}

    @abstractmethod
    def settings(self) -> "dict[str, SettingField]":
        """Settings required for module configuration.

        Returns:
            Ordered mapping of setting key to field descriptor.
        """
        raise NotImplementedError

    @abstractmethod
    def test_connection(self, settings: Any) -> bool:
        """Validate settings before the host saves them.

        Args:
            settings: Values submitted by the admin.

        Returns:
            True when the settings may be saved.
        """
        raise NotImplementedError

    @abstractmethod
    def notification_settings(self) -> "dict[str, SettingField]":
        """Per-rule customisable settings."""
        raise NotImplementedError

    @abstractmethod
    def get_dynamic_field(self, field_name: str, settings: Any) -> list:
        """Option values for a 'dynamic' notification setting.

        Args:
            field_name: Notification setting field name.
            settings: Settings for the module.

        Returns:
            List of option dicts with 'id', 'name' and 'description'.
        """
        raise NotImplementedError

    @abstractmethod
    def send_notification(
        self,
        notification: NotificationEvent,
        module_settings: Any,
        notification_settings: Any,
    ) -> None:
        """Deliver a notification.

        Args:
            notification: The notification to send.
            module_settings: Configured settings of the module.
            notification_settings: Settings of the triggered rule.

        Raises:
            NotImplementedError: Must be implemented by subclasses.
            Exception: If sending fails.
        """
        raise NotImplementedError
