"""Logging setup driven by LoggingConfig."""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import LoggingConfig

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
PACKAGE_LOGGER = "vision_target_tracker"


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Attach handlers to the package logger.

    Calling it again replaces the handlers installed by a previous call,
    so the level or file target can be changed at runtime.

    Args:
        config: Logging settings; defaults to LoggingConfig()

    Returns:
        The configured package logger
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if handler.get_name() == PACKAGE_LOGGER:
            logger.removeHandler(handler)
            handler.close()

    logger.setLevel(getattr(logging, str(config.level).upper(), logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT)

    handlers = []
    if config.console_enabled:
        handlers.append(logging.StreamHandler())
    if config.file_enabled:
        try:
            handlers.append(RotatingFileHandler(
                config.file_path,
                maxBytes=config.max_file_size,
                backupCount=config.backup_count,
                encoding="utf-8",
            ))
        except OSError as e:
            logger.error(f"Cannot open log file {config.file_path}: {e}")

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.set_name(PACKAGE_LOGGER)
        logger.addHandler(handler)

    return logger
