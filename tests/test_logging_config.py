"""Tests for the logging setup helper."""

import logging
import logging.handlers

import pytest

from src.logging_config import setup_logging


@pytest.fixture
def bare_root_logger():
    """Give the test a root logger with no handlers, then restore it."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    root.handlers = []
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def _clear_root_handlers():
    """Drop handlers pytest's logging plugin attaches for the test call."""
    logging.getLogger().handlers = []


class TestSetupLogging:
    def test_writes_to_given_dir(self, tmp_path, bare_root_logger):
        log_dir = tmp_path / "nested" / "logs"
        _clear_root_handlers()
        setup_logging("WARNING", log_dir=log_dir)

        assert (log_dir / "team_balancer.log").exists()
        file_handlers = [
            h for h in bare_root_logger.handlers
            if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG

    def test_console_uses_requested_level(self, tmp_path, bare_root_logger):
        _clear_root_handlers()
        setup_logging("warning", log_dir=tmp_path)
        console = [
            h for h in bare_root_logger.handlers
            if not isinstance(h, logging.FileHandler)
        ]
        assert [h.level for h in console] == [logging.WARNING]
        assert bare_root_logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, tmp_path, bare_root_logger):
        _clear_root_handlers()
        setup_logging("chatty", log_dir=tmp_path)
        console = [
            h for h in bare_root_logger.handlers
            if not isinstance(h, logging.FileHandler)
        ]
        assert console[0].level == logging.INFO

    def test_second_call_is_a_no_op(self, tmp_path, bare_root_logger):
        _clear_root_handlers()
        setup_logging(log_dir=tmp_path / "first")
        setup_logging(log_dir=tmp_path / "second")
        assert len(bare_root_logger.handlers) == 2
        assert not (tmp_path / "second").exists()
