"""
Tests for the logger module.
"""

import logging

from canvas_reader.logger import setup_logger


class TestSetupLogger:
    """Tests for setup_logger function."""

    def test_console_handler(self):
        logger = setup_logger(name="canvas_reader.test_console")

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_file_only(self, tmp_path):
        log_file = tmp_path / "logs" / "reader.log"

        logger = setup_logger(name="canvas_reader.test_file", log_file=str(log_file), console=False)
        logger.warning("hello")
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "hello" in log_file.read_text()

    def test_no_handlers_gets_null_handler(self):
        logger = setup_logger(name="canvas_reader.test_null", console=False)

        assert [type(h) for h in logger.handlers] == [logging.NullHandler]

    def test_repeat_calls_replace_handlers(self):
        setup_logger(name="canvas_reader.test_repeat")
        logger = setup_logger(name="canvas_reader.test_repeat", level=logging.DEBUG)

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
