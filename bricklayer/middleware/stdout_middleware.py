#!/usr/bin/env python3
"""
Stdout middleware: prints the result of the wrapped chain.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Any

from rich.console import Console

from .middleware import Middleware


class StdoutMiddleware(Middleware):
    """Print the delegate's result to the console and return it unchanged."""

    def __init__(self, app=None, console: Console | None = None, **options: Any) -> None:
        super().__init__(app, **options)
        self.console = console or Console()

    def call(self, params: dict[str, Any] | None = None) -> Any:
        result = super().call(params)
        if result is not None and result != "":
            self.console.print(result, markup=False)
        return result
