#!/usr/bin/env python3
"""
bricklayer - middleware-style brick pipelines

A pipeline is an ordered list of bricks folded into one nested chain;
each brick receives the shared params bag and may delegate to the next.

Author: Marc Rivero (@seifreed)
License: GPL-3.0
"""

from .__version__ import __author__, __author_email__, __license__, __url__, __version__

__description__ = "Middleware-style brick pipelines"

from .bricks import LOGGER_KEY, Brick
from .exceptions import BricklayerError, BrickLoadError, BrickVersionError, ConfigError
from .pipeline import EmptyBrick, Pipeline, iter_chain

__all__ = [
    "Brick",
    "BricklayerError",
    "BrickLoadError",
    "BrickVersionError",
    "ConfigError",
    "EmptyBrick",
    "LOGGER_KEY",
    "Pipeline",
    "iter_chain",
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__url__",
    "__description__",
]
