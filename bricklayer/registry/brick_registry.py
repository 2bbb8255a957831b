#!/usr/bin/env python3
"""
Brick registry for bricklayer.

Maps short names to brick factories and resolves dotted references such
as ``package.module:ClassName`` so pipelines can be declared in
configuration files and on the command line.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

import importlib
import inspect
from collections.abc import Callable, Iterable
from typing import Any

from ..bricks.brick import Brick
from ..exceptions import BrickLoadError, BrickVersionError
from ..middleware import BenchMiddleware, LoggerMiddleware, StdoutMiddleware
from ..utils.logger import get_logger

logger = get_logger(__name__)

BUILTIN_BRICKS: dict[str, type[Brick]] = {
    "bench": BenchMiddleware,
    "logger": LoggerMiddleware,
    "stdout": StdoutMiddleware,
}


def resolve_brick(reference: str) -> type[Brick]:
    """
    Import the Brick class named by a dotted reference.

    Both ``package.module:ClassName`` and ``package.module.ClassName`` are
    accepted.

    Raises:
        BrickLoadError: If the reference is malformed, cannot be imported,
            or does not name a Brick subclass
    """
    module_name, sep, attr = reference.partition(":")
    if not sep:
        module_name, _, attr = reference.rpartition(".")
    if not module_name or not attr:
        raise BrickLoadError(f"Invalid brick reference: '{reference}'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise BrickLoadError(
            f"Cannot import module '{module_name}' for brick '{reference}': {e}"
        ) from e

    obj = getattr(module, attr, None)
    if obj is None:
        raise BrickLoadError(f"Module '{module_name}' has no attribute '{attr}'")
    if not (inspect.isclass(obj) and issubclass(obj, Brick)):
        raise BrickLoadError(f"'{reference}' is not a Brick subclass")
    return obj


def _qualified_name(factory: Any) -> str:
    qualname = getattr(factory, "__qualname__", None)
    if qualname is None:
        return repr(factory)
    return f"{factory.__module__}.{qualname}"


class BrickRegistry:
    """
    Registry of named brick factories.

    Built-in middleware bricks are registered by default; more can be
    added with register() or through EntryPointLoader.
    """

    def __init__(self, include_builtins: bool = True) -> None:
        self._bricks: dict[str, Callable[..., Any]] = {}
        if include_builtins:
            for name, factory in BUILTIN_BRICKS.items():
                self.register(name, factory)

    def register(self, name: str, factory: Callable[..., Any]) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Brick name cannot be empty")
        if not callable(factory):
            raise TypeError(f"Brick factory for '{name}' must be callable")
        name = name.strip()
        if name in self._bricks:
            logger.debug(f"Replacing registered brick '{name}'")
        self._bricks[name] = factory

    def unregister(self, name: str) -> bool:
        return self._bricks.pop(name, None) is not None

    def get(self, name: str) -> Callable[..., Any] | None:
        return self._bricks.get(name)

    def names(self) -> list[str]:
        return sorted(self._bricks)

    def resolve(self, name: str) -> Callable[..., Any]:
        """Return the factory registered as name, falling back to a dotted reference."""
        factory = self.get(name)
        if factory is not None:
            return factory
        return resolve_brick(name)

    def resolve_all(self, names: Iterable[str]) -> list[Callable[..., Any]]:
        return [self.resolve(name) for name in names]

    def describe(self) -> list[dict[str, str | None]]:
        """
        Describe every registered brick for display.

        Returns:
            One dict per brick with name, qualified class path, declared
            version (None when the brick does not declare one) and the
            error raised while reading the version, if any
        """
        rows = []
        for name in self.names():
            factory = self._bricks[name]
            error = None
            try:
                version = factory().version()
            except BrickVersionError:
                version = None
            except Exception as e:
                logger.warning(f"Could not read version of brick '{name}': {e}")
                version = None
                error = str(e)
            rows.append(
                {
                    "name": name,
                    "class": _qualified_name(factory),
                    "version": version,
                    "error": error,
                }
            )
        return rows

    def __contains__(self, name: object) -> bool:
        return name in self._bricks

    def __len__(self) -> int:
        return len(self._bricks)
