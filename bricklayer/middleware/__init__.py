"""
Middleware bricks shipped with bricklayer.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .bench_middleware import BenchMiddleware
from .logger_middleware import LoggerMiddleware
from .middleware import Middleware
from .stdout_middleware import StdoutMiddleware

__all__ = [
    "BenchMiddleware",
    "LoggerMiddleware",
    "Middleware",
    "StdoutMiddleware",
]
