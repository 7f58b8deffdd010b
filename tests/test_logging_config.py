"""Tests for logging setup."""

import logging

from chatpull.logging_config import configure_logging, setup_logging
from chatpull.models.config import ExportConfig


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_configures_chatpull_logger(self):
        """Test level, handler and propagation."""
        logger = setup_logging(level="DEBUG")

        assert logger.name == "chatpull"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_invalid_level_falls_back_to_info(self):
        """Test unknown level names."""
        assert setup_logging(level="nonsense").level == logging.INFO

    def test_does_not_duplicate_handlers(self):
        """Test repeated setup keeps one handler unless forced."""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

        logger = setup_logging(force=True)
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        """Test file handler output."""
        log_file = tmp_path / "chatpull.log"
        logger = setup_logging(level="INFO", log_file=str(log_file), force=True)

        logging.getLogger("chatpull.core.exporter").info("Saved: x.md")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert "Saved: x.md" in log_file.read_text(encoding="utf-8")


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_applies_config_level_and_file(self, tmp_path):
        """Test the export config's log level and log file are used."""
        log_file = tmp_path / "export.log"
        config = ExportConfig(log_level="WARNING", log_file=log_file)
        logger = configure_logging(config, force=True)

        logging.getLogger("chatpull.extraction.turns").warning("Unknown role")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 2
        assert "Unknown role" in log_file.read_text(encoding="utf-8")

    def test_path_log_file(self, tmp_path):
        """Test setup_logging accepts a Path for the log file."""
        logger = setup_logging(log_file=tmp_path / "chatpull.log", force=True)
        assert isinstance(logger.handlers[1], logging.FileHandler)
