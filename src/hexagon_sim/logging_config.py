# MIT License (see LICENSE)
"""
Logging configuration for scripts and front ends.

The library itself only creates module loggers under the "hexagon_sim"
namespace; call setup_logging() from an application to see their output.
"""
from __future__ import annotations
import logging
import sys

LOGGER_NAME = "hexagon_sim"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    Configure the "hexagon_sim" namespace logger.

    Args:
        level: Logging level (e.g. logging.DEBUG to see every wall contact).
        log_file: Optional path to also write logs to.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate output when called more than once
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
