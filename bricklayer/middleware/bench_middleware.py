#!/usr/bin/env python3
"""
Benchmark middleware: measures how long the wrapped chain takes.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

import time
from typing import Any

from ..utils.logger import get_logger
from .middleware import Middleware

logger = get_logger(__name__)

# Params bag entry collecting timings, keyed by delegate class name
BENCH_KEY = "bench"


class BenchMiddleware(Middleware):
    """
    Time the delegate call.

    The elapsed time is stored in params[BENCH_KEY][<delegate class name>]
    and logged through Brick.log(). Timing is recorded even when the
    delegate raises; the exception is not caught.
    """

    def call(self, params: dict[str, Any] | None = None) -> Any:
        self.params = params if params is not None else {}
        if self.app is None:
            return ""

        target = type(self.app).__name__
        start = time.perf_counter()
        try:
            return self.app.call(self.params)
        finally:
            elapsed = time.perf_counter() - start
            self._record(target, elapsed)
            self.log(f"{target} took {elapsed:.4f}s")

    def _record(self, target: str, elapsed: float) -> None:
        timings = self.params.setdefault(BENCH_KEY, {})
        if not isinstance(timings, dict):
            logger.warning(
                f"Params entry '{BENCH_KEY}' is not a dict, skipping timing for {target}"
            )
            return
        timings[target] = elapsed
