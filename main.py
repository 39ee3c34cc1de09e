"""Command line entry point for the Telegram notification module."""

import sys

from telegram_notifier.cli import main

if __name__ == '__main__':
    sys.exit(main())
