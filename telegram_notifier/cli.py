"""Command line interface for the Telegram notification module."""

import argparse
import json
import sys

from telegram_notifier import __description__, __version__
from telegram_notifier.config_loader import load_config
from telegram_notifier.exceptions import ConfigError, DeliveryError
from telegram_notifier.logging_setup import setup_logging
from telegram_notifier.modules import get_module
from telegram_notifier.notification import Notification


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="telegram-notifier",
        description=f"{__description__} v{__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("settings", help="Print the module settings form as JSON")

    test_parser = subparsers.add_parser("test", help="Validate the configured settings")
    test_parser.add_argument("--config", help="Path to config file")

    send_parser = subparsers.add_parser("send", help="Send one notification")
    send_parser.add_argument("message", help="Message text")
    send_parser.add_argument("--url", default="", help="Reference URL appended to the message")
    send_parser.add_argument("--config", help="Path to config file")

    return parser


def main(argv=None) -> int:
    opts = build_parser().parse_args(argv)
    module = get_module("telegram")()

    if opts.command == "settings":
        print(json.dumps(module.settings_form(), indent=2))
        return 0

    try:
        config = load_config(opts.config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if opts.command == "test":
        ok = module.test_connection(config.module.to_dict())
        print("Settings OK" if ok else "Settings rejected")
        return 0 if ok else 1

    try:
        setup_logging(level=config.logging.level, path=config.logging.path)
    except OSError as e:
        print(f"Cannot write logs to {config.logging.path}: {e}", file=sys.stderr)
        return 1

    notification = Notification(message=opts.message, url=opts.url)
    try:
        module.send_notification(notification, config.module, {})
    except DeliveryError as e:
        print(f"Delivery failed: {e}", file=sys.stderr)
        return 1

    return 0

