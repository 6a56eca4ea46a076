# leapwire/log_config.py
"""Logging configuration for leapwire using Loguru.

Every client in the package logs through the same Loguru ``logger``; this
module re-exports it and offers a single function to install a formatted
handler, so services embedding the clients get uniform output.
"""

import sys

from loguru import logger

__all__ = ["configure_logging", "logger"]

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO", sink=sys.stderr):
    """
    Configures the Loguru logger used by all leapwire clients.

    Removes existing handlers and adds one with the given level and sink.

    Args:
        level: The minimum logging level (e.g., "DEBUG", "INFO", "WARNING").
        sink: The output sink (e.g., sys.stderr, "leapwire.log").
    """
    logger.remove()
    logger.add(
        sink,
        level=level.upper(),
        format=LOG_FORMAT,
        colorize=sink is sys.stderr,
        backtrace=True,
        diagnose=False,
    )
    logger.info(f"leapwire logging configured with level={level.upper()}")
