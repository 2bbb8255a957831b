#!/usr/bin/env python3
"""
bricklayer exception hierarchy

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""


class BricklayerError(Exception):
    """Base class for all bricklayer errors"""


class BrickVersionError(BricklayerError, NotImplementedError):
    """Raised when a concrete brick does not declare its version"""


class BrickLoadError(BricklayerError, ImportError):
    """Raised when a brick reference cannot be resolved to a Brick class"""


class ConfigError(BricklayerError, ValueError):
    """Raised when configuration content is invalid"""
