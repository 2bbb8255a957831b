"""
Brick registry and loaders.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .brick_registry import BUILTIN_BRICKS, BrickRegistry, resolve_brick
from .entry_points import ENTRY_POINT_GROUP, EntryPointLoader

__all__ = [
    "BUILTIN_BRICKS",
    "BrickRegistry",
    "ENTRY_POINT_GROUP",
    "EntryPointLoader",
    "resolve_brick",
]
