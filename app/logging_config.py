"""Centralized logging configuration for the match log service."""
import logging
import sys
from typing import Optional, Union


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Configure logging for the application.

    Attaches a single console handler to the ``app`` logger so every module
    logger created with ``logging.getLogger(__name__)`` shares one format.

    Args:
        level: Logging level name or number (default: settings.log_level)

    Returns:
        Configured ``app`` logger

    Example:
        from app.logging_config import setup_logging
        logger = setup_logging("DEBUG")
        logger.info("Starting match log service")
    """
    if level is None:
        from app.config import settings
        level = settings.log_level

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("app")
    logger.setLevel(level)

    # Clear any existing handlers (lifespan can run more than once in tests)
    logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    # Don't double-log through the root logger
    logger.propagate = False

    return logger
