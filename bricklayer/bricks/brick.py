#!/usr/bin/env python3
"""
Brick base class for bricklayer pipelines.

A brick is a single pipeline step. It receives the shared params bag,
may read and modify it, and may hand it to the delegate brick it wraps.
Concrete bricks subclass Brick, override call() and declare version().

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Any

from ..exceptions import BrickVersionError
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Params bag key holding the logger used by Brick.log()
LOGGER_KEY = "gdc_logger"


class Brick:
    """
    Unit of work in a pipeline.

    Attributes:
        app: Delegate brick wrapped by this one (None for the innermost brick)
        options: Extra keyword options given at construction time
        params: Params bag received by the last call()
    """

    def __init__(self, app: "Brick | None" = None, **options: Any) -> None:
        self.app = app
        self.options: dict[str, Any] = options
        self.params: dict[str, Any] = {}

    def call(self, params: dict[str, Any] | None = None) -> Any:
        """
        Run this brick against the params bag.

        The base implementation only keeps a reference to the bag and
        returns an empty result. The bag is never copied.
        """
        self.params = params if params is not None else {}
        return ""

    def log(self, message: str) -> None:
        """Send message at info level to the logger stored in the params bag, if any."""
        try:
            sink = self.params.get(LOGGER_KEY)
        except AttributeError:
            return
        if not sink:
            return

        info = getattr(sink, "info", None)
        if not callable(info):
            return
        try:
            info(message)
        except Exception as e:
            logger.debug(f"Brick logger failed for {self._display_name()}: {e}")

    def name(self) -> type:
        """Return the concrete brick type."""
        return type(self)

    def version(self) -> str:
        raise BrickVersionError("Method version should be reimplemented")

    def _display_name(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        inner = type(self.app).__name__ if self.app is not None else None
        return f"<{self._display_name()} app={inner}>"
