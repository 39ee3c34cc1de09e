"""Allow running as ``python -m telegram_notifier``."""

import sys

from telegram_notifier.cli import main

sys.exit(main())
