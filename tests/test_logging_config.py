"""Tests for the logging setup."""
import logging

from deskcalc.logging_config import setup_logging


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "calc.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))

    logger = logging.getLogger("deskcalc")
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        logging.getLogger("deskcalc.model.engine").debug("key pressed")
        for handler in logger.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "deskcalc.model.engine - DEBUG - key pressed" in text
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()


def test_setup_logging_does_not_duplicate_handlers():
    logger = logging.getLogger("deskcalc")
    try:
        setup_logging()
        setup_logging()
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()
