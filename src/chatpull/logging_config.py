"""Logging setup for the chatpull logger hierarchy."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from .models.config import ExportConfig

LOGGER_NAME = "chatpull"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    format_string: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Configure the ``chatpull`` logger.

    Module loggers (``chatpull.core.exporter``, ``chatpull.extraction.turns``, ...)
    inherit these handlers. Output goes to stdout, and to ``log_file`` when given.

    Args:
        level: Logging level name; unknown names fall back to INFO
        log_file: Optional file receiving the same records
        format_string: Optional custom format string for log messages
        force: If True, replace handlers installed by an earlier call

    Returns:
        The configured ``chatpull`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    if force or not logger.handlers:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

        formatter = logging.Formatter(format_string or DEFAULT_FORMAT)
        handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
        if log_file:
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

        for handler in handlers:
            handler.setLevel(numeric_level)
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    # Exports print their own status lines; keep records out of the root logger
    logger.propagate = False

    return logger


def configure_logging(config: ExportConfig, force: bool = False) -> logging.Logger:
    """Configure logging from the ``log_level`` and ``log_file`` of an export config."""
    return setup_logging(level=config.log_level, log_file=config.log_file, force=force)
