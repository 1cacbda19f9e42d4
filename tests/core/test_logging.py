"""Unit tests for src/core/logging.py"""

from pathlib import Path

from loguru import logger

from src.core.config import Settings
from src.core.logging import setup_logging


def test_log_file_gets_written(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "game.log"
    setup_logging(Settings(log_level="info", log_file=str(log_file)))
    try:
        logger.info("Selecting piece: 4")
        logger.debug("too chatty to show up")
    finally:
        # close the file sink, back to plain stderr
        setup_logging(Settings())

    content = log_file.read_text()
    assert "Selecting piece: 4" in content
    assert "too chatty" not in content


def test_debug_level_from_settings(tmp_path: Path) -> None:
    log_file = tmp_path / "debug.log"
    setup_logging(Settings(log_level="DEBUG", log_file=str(log_file), log_retention="1 day"))
    try:
        logger.debug("Invalid move: pawn three squares ahead")
    finally:
        setup_logging(Settings())

    assert "Invalid move: pawn three squares ahead" in log_file.read_text()
