"""
Logging setup for File Console.

Diagnostics go through loguru; nothing is emitted unless a level or a log
file is configured, so the interactive output stays clean.
"""

import sys

from loguru import logger


def setup_logging(level: str = "", log_file: str = "") -> None:
    """Configure loguru sinks.

    Args:
        level: Minimum level for the stderr sink (e.g. "DEBUG"). Empty disables it.
        log_file: Path of a log file sink. Empty disables it.
    """
    logger.remove()

    if level:
        logger.add(
            sys.stderr,
            level=level.upper(),
            format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
        )

    if log_file:
        logger.add(
            log_file,
            level=(level or "DEBUG").upper(),
            encoding="utf-8",
        )
