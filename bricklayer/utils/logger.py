#!/usr/bin/env python3
"""
Logging utilities for bricklayer
"""

import logging
import sys
from pathlib import Path

import colorlog

CONSOLE_FORMAT = "%(log_color)s%(levelname)-8s%(reset)s %(name)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "bricklayer",
    level: int | str = logging.INFO,
    log_file: str | None = None,
) -> logging.Logger:
    """Setup logger with a colored console handler and an optional file handler"""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(colorlog.ColoredFormatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "bricklayer") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


def configure_logging_levels(verbose: bool, quiet: bool) -> None:
    """Configure logging levels based on verbosity settings."""
    if quiet:
        logging.getLogger("bricklayer").setLevel(logging.WARNING)
        return

    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger("bricklayer").setLevel(level)
