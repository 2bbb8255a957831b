"""
Pipeline module for composing bricks in bricklayer.

This module implements the middleware-style composition of bricks: an
ordered list of brick factories is folded into one nested chain where
each brick delegates to the next one.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .brick_pipeline import EmptyBrick, Pipeline, iter_chain

__all__ = [
    "EmptyBrick",
    "Pipeline",
    "iter_chain",
]
