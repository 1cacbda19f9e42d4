"""
Logging configuration (loguru).

Every module simply does `from loguru import logger`. This module only decides where the records go:
stderr always, plus a rotating file when the settings name one.
"""

import sys
from pathlib import Path

from loguru import logger

from src.core.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logging(settings: Settings) -> None:
    """(Re)configure the loguru sinks from the settings. Replaces whatever sinks were there before."""
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level, format=CONSOLE_FORMAT, colorize=True)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            level=settings.log_level,
            format=FILE_FORMAT,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
        )

    logger.debug(f"Logging configured at level: {settings.log_level}")
