"""
Brick contract shared by every pipeline step.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .brick import LOGGER_KEY, Brick

__all__ = ["Brick", "LOGGER_KEY"]
