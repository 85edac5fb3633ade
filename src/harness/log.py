from __future__ import annotations

import logging


LOGGER_NAME = "aoc2020"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def configure_logging(log_level: str = "WARNING", logger_name: str = LOGGER_NAME) -> logging.Logger:
    """
    Attach a console handler to the project's root logger.

    Args:
        log_level (str): Logging level name (e.g., "INFO", "DEBUG").
        logger_name (str): Parent logger; module loggers under the harness,
            runner and day packages propagate here.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    if not logger.handlers:  # Prevent handler duplication
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the project logger, e.g. "aoc2020.harness.resolver"."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
