#!/usr/bin/env python3
"""
Logger middleware: makes sure the params bag carries a logger.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

import logging
from typing import Any

from ..bricks.brick import LOGGER_KEY
from ..utils.logger import setup_logger
from .middleware import Middleware

# Optional params bag entry selecting the level of the installed logger
LOG_LEVEL_KEY = "log_level"


class LoggerMiddleware(Middleware):
    """Install the bricklayer logger under LOGGER_KEY unless one is already there."""

    def call(self, params: dict[str, Any] | None = None) -> Any:
        bag = params if params is not None else {}
        if not bag.get(LOGGER_KEY):
            level = bag.get(LOG_LEVEL_KEY, logging.INFO)
            if isinstance(level, str):
                level = level.strip().upper()
            bag[LOGGER_KEY] = setup_logger(level=level)
        return super().call(bag)
