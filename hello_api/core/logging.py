"""
Logging configuration for the Hello API service.
"""
import sys
from typing import Optional

from loguru import logger

from hello_api.core.config import settings


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """
    Configure logging for the application.

    Console output goes to stdout. A file sink is only added when a log
    file is configured, rotated at midnight and kept for 30 days.
    """
    log_level = level or settings.LOG_LEVEL
    log_file = log_file or settings.LOG_FILE

    logger.remove()  # Remove default handler
    logger.add(
        sys.stdout,
        format=LOG_FORMAT,
        level=log_level,
        diagnose=False
    )
    if log_file:
        logger.add(
            log_file,
            rotation="00:00",  # new file at midnight
            retention="30 days",
            compression="zip",
            format=LOG_FORMAT,
            level=log_level,
            diagnose=False
        )

    return logger
