#!/usr/bin/env python3
"""
Base middleware brick.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Any

from ..__version__ import __version__
from ..bricks.brick import Brick


class Middleware(Brick):
    """
    Brick whose job is to wrap its delegate.

    call() forwards the very same params bag to the delegate and returns
    the delegate's result. Subclasses add their behaviour around it.
    """

    def call(self, params: dict[str, Any] | None = None) -> Any:
        super().call(params)
        if self.app is None:
            return ""
        return self.app.call(self.params)

    def version(self) -> str:
        return __version__
