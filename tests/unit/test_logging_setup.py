"""Tests for telegram_notifier.logging_setup module."""

import logging
import pytest

from telegram_notifier.logging_setup import log_file_path, setup_logging


@pytest.fixture(autouse=True)
def _clear_handlers():
    logger = logging.getLogger("telegram_notifier")
    logger.handlers.clear()
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_creates_logger_with_name(self, tmp_path):
        logger = setup_logging(path=str(tmp_path))

        assert logger.name == "telegram_notifier"

    def test_sets_log_level_from_string(self, tmp_path):
        logger = setup_logging(level="debug", path=str(tmp_path))

        assert logger.level == logging.DEBUG

    def test_defaults_to_info_for_invalid_level(self, tmp_path):
        logger = setup_logging(level="INVALID", path=str(tmp_path))

        assert logger.level == logging.INFO

    def test_default_logs_to_stderr_only(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        logger = setup_logging()

        assert [type(h).__name__ for h in logger.handlers] == ["StreamHandler"]
        assert list(tmp_path.iterdir()) == []

    def test_creates_log_directory(self, tmp_path):
        log_path = tmp_path / "nested" / "logs"

        setup_logging(path=str(log_path))

        assert log_path.exists()

    def test_creates_log_file(self, tmp_path):
        setup_logging(path=str(tmp_path))

        assert len(list(tmp_path.glob("telegram_notifier*.log"))) == 1

    def test_adds_file_and_stream_handlers(self, tmp_path):
        logger = setup_logging(path=str(tmp_path))

        handler_types = sorted(type(h).__name__ for h in logger.handlers)
        assert handler_types == ["FileHandler", "StreamHandler"]

    def test_repeated_calls_replace_handlers(self, tmp_path):
        setup_logging(path=str(tmp_path))
        logger = setup_logging(level="DEBUG")

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_raises_for_unwritable_directory(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")

        with pytest.raises(OSError):
            setup_logging(path=str(blocker / "logs"))


class TestLogFilePath:
    """Tests for log_file_path function."""

    def test_names_file_after_package_and_version(self, tmp_path):
        from telegram_notifier import __version__

        name = log_file_path(str(tmp_path))

        assert name.startswith(str(tmp_path / f"telegram_notifier({__version__})_"))
        assert name.endswith(".log")
