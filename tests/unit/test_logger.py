"""Unit тесты для src.utils.logger."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from src.utils.logger import ROOT_LOGGER_NAME, get_child_logger, setup_logger


@pytest.fixture
def clean_root_logger():
    """Снимает handlers с корневого логгера пакета до и после теста."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    saved_level = root.level

    def _clear():
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

    _clear()
    yield root
    _clear()
    root.setLevel(saved_level)


class TestSetupLogger:
    """setup_logger."""

    def test_console_handler(self, clean_root_logger):
        logger = setup_logger("DEBUG")

        assert logger is clean_root_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_file_handler(self, clean_root_logger, tmp_path):
        log_path = tmp_path / "quoting.log"

        logger = setup_logger("info", str(log_path))
        logger.info("hello")

        assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        assert "hello" in log_path.read_text(encoding="utf-8")

    def test_idempotent(self, clean_root_logger):
        setup_logger("INFO")
        setup_logger("DEBUG")

        assert len(clean_root_logger.handlers) == 1
        assert clean_root_logger.level == logging.INFO

    def test_unknown_level_falls_back_to_info(self, clean_root_logger):
        assert setup_logger("LOUD").level == logging.INFO

    def test_int_level(self, clean_root_logger):
        assert setup_logger(logging.WARNING).level == logging.WARNING


class TestGetChildLogger:
    """get_child_logger."""

    def test_default_parent(self):
        assert get_child_logger(None, "ladder").name == "ammcore.ladder"

    def test_explicit_parent(self):
        parent = logging.getLogger("ammcore.maker")
        assert get_child_logger(parent, "engine").name == "ammcore.maker.engine"