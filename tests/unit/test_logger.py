"""
Unit tests for logging setup.
"""

import logging
import os
from unittest.mock import patch

import pytest

from meditech_voice.config.settings import reset_settings
from meditech_voice.utils.logger import NOISY_LOGGERS, setup_logger


@pytest.fixture
def logger_name(request):
    name = f"meditech_voice.test.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


@pytest.mark.unit
class TestSetupLogger:
    """Test logger configuration from LoggingSettings."""

    def test_level_from_environment(self, logger_name):
        with patch.dict(os.environ, {"LOG_LEVEL": "warning"}):
            reset_settings()
            logger = setup_logger(logger_name)

        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_no_duplicate_handlers(self, logger_name):
        first = setup_logger(logger_name)
        second = setup_logger(logger_name)

        assert first is second
        assert len(second.handlers) == 1

    def test_log_file(self, logger_name, tmp_path):
        log_file = tmp_path / "logs" / "voice.log"
        with patch.dict(os.environ, {"LOG_FILE": str(log_file)}):
            reset_settings()
            logger = setup_logger(logger_name)

        logger.warning("Microphone not available")
        for handler in logger.handlers:
            handler.flush()

        assert "Microphone not available" in log_file.read_text(encoding="utf-8")

    def test_explicit_level_overrides_environment(self, logger_name):
        with patch.dict(os.environ, {"LOG_LEVEL": "ERROR"}):
            reset_settings()
            logger = setup_logger(logger_name, level="debug")

        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, logger_name):
        assert setup_logger(logger_name, level="chatty").level == logging.INFO

    def test_speech_library_loggers_quieted(self, logger_name):
        logging.getLogger("gtts").setLevel(logging.DEBUG)

        setup_logger(logger_name)

        for noisy in NOISY_LOGGERS:
            assert logging.getLogger(noisy).level == logging.WARNING
