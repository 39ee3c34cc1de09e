"""YAML configuration loader with env var interpolation."""

import os
import re
import yaml
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from telegram_notifier.config_schema import (
    Config, LoggingConfig, ModuleSettings
)
from telegram_notifier.exceptions import ConfigError


def load_config(cli_path: "Optional[str]" = None) -> Config:
    """Load configuration from YAML file.

    Search order:
    1. CLI-specified path
    2. ./telegram_notifier.yaml
    3. ~/.config/telegram_notifier/config.yaml
    4. /etc/telegram_notifier/config.yaml

    Variables from a .env file in the working directory, or the nearest
    parent holding one, are loaded first and never override the environment.
    """
    load_dotenv(find_dotenv(usecwd=True))

    search_paths = [
        Path("./telegram_notifier.yaml"),
        Path.home() / ".config" / "telegram_notifier" / "config.yaml",
        Path("/etc/telegram_notifier/config.yaml"),
    ]

    if cli_path:
        config_path = Path(cli_path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {cli_path}")
    else:
        config_path = None
        for path in search_paths:
            if path.exists():
                config_path = path
                break

        if config_path is None:
            searched = "\n  ".join(str(p) for p in search_paths)
            raise ConfigError(
                f"No config file found. Searched:\n  {searched}\n\n"
                "Create telegram_notifier.yaml or specify --config path"
            )

    return _parse_config(config_path)


def _parse_config(path: Path) -> Config:
    """Parse YAML config file."""
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")

    if not isinstance(raw, dict):
        raise ConfigError(f"Config must be a YAML mapping, got {type(raw).__name__}")

    telegram_raw = raw.get("telegram")
    if not telegram_raw:
        raise ConfigError("No telegram section configured")
    if not isinstance(telegram_raw, dict):
        raise ConfigError("The telegram section must be a mapping")

    module = ModuleSettings.from_dict(
        {key: _interpolate(value) for key, value in telegram_raw.items()}
    )

    logging_raw = raw.get("logging") or {}
    logging_config = LoggingConfig(
        level=_interpolate(logging_raw.get("level", "INFO")),
        path=_interpolate(logging_raw.get("path")),
    )

    return Config(module=module, logging=logging_config)


def _interpolate(value: "Optional[str]") -> "Optional[str]":
    """Expand ${VAR} references in a string value."""
    if value is None:
        return None
    if not isinstance(value, str):
        return value

    pattern = re.compile(r'\$\{([^}]+)\}')

    def replacer(match):
        var_name = match.group(1)
        env_value = os.environ.get(var_name)
        if env_value is None:
            raise ConfigError(f"Environment variable not set: {var_name}")
        return env_value

    return pattern.sub(replacer, value)
