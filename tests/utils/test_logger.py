"""Tests for the application logger utility."""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

from rich.logging import RichHandler


def test_get_logger_creates_log_file(tmp_path):
    """Logger creates the log file inside user_log_dir."""
    with patch("tasklist_cli.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from tasklist_cli.utils.logger import get_logger

        logger = get_logger()

    assert (tmp_path / "tasklist.log").exists()
    assert isinstance(logger, logging.Logger)


def test_get_logger_returns_singleton(tmp_path):
    with patch("tasklist_cli.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from tasklist_cli.utils.logger import get_logger

        assert get_logger() is get_logger()


def test_messages_are_written(tmp_path):
    with patch("tasklist_cli.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from tasklist_cli.utils.logger import get_logger

        logger = get_logger()
        logger.info("hello from the store")
        for handler in logger.handlers:
            handler.flush()

    content = (tmp_path / "tasklist.log").read_text(encoding="utf-8")
    assert "hello from the store" in content
    assert "INFO" in content


def test_console_handler_only_shows_warnings(tmp_path):
    with patch("tasklist_cli.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from tasklist_cli.utils.logger import get_logger

        logger = get_logger()

    rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert rich_handlers[0].level == logging.WARNING
    assert logger.propagate is False


def test_foreign_handler_does_not_block_setup(tmp_path):
    """A handler attached by someone else must not stop ours from being added."""
    foreign = logging.NullHandler()
    logging.getLogger("tasklist_cli").addHandler(foreign)
    try:
        with patch("tasklist_cli.utils.logger.user_log_dir", return_value=str(tmp_path)):
            from tasklist_cli.utils.logger import get_logger

            logger = get_logger()
            logger.info("still reaches the file")
            for handler in logger.handlers:
                handler.flush()

        file_handlers = [
            h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert len([h for h in logger.handlers if isinstance(h, RichHandler)]) == 1
        assert foreign in logger.handlers
        content = (tmp_path / "tasklist.log").read_text(encoding="utf-8")
        assert "still reaches the file" in content
    finally:
        logging.getLogger("tasklist_cli").removeHandler(foreign)
