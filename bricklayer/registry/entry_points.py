#!/usr/bin/env python3
"""Entry point loading for bricks."""

from __future__ import annotations

import inspect
import logging
from importlib.metadata import entry_points
from typing import Any

from ..bricks.brick import Brick

ENTRY_POINT_GROUP = "bricklayer.bricks"


class EntryPointLoader:
    """Load bricks registered via Python entry points."""

    def __init__(self, registry: Any) -> None:
        self._registry = registry

    def load(self, group: str = ENTRY_POINT_GROUP) -> int:
        loaded = 0
        eps_group = self._get_entry_points_group(group)
        if not eps_group:
            return loaded
        for ep in eps_group:
            loaded += self._handle_entry_point(ep)
        return loaded

    def _get_entry_points_group(self, group: str) -> list[Any]:
        return list(entry_points(group=group))

    def _handle_entry_point(self, ep: Any) -> int:
        try:
            obj = ep.load()
        except Exception as exc:
            logging.getLogger(__name__).warning(
                f"Failed to load entry point '{getattr(ep, 'name', '?')}': {exc}"
            )
            return 0

        if inspect.isclass(obj):
            return self._register_entry_point_class(ep, obj)

        if callable(obj):
            return self._register_entry_point_callable(ep, obj)

        return 0

    def _register_entry_point_callable(self, ep: Any, obj: Any) -> int:
        try:
            obj(self._registry)
            return 1
        except Exception as exc:
            logging.getLogger(__name__).warning(f"Entry point '{ep.name}' callable failed: {exc}")
            return 0

    def _register_entry_point_class(self, ep: Any, obj: Any) -> int:
        if not issubclass(obj, Brick):
            logging.getLogger(__name__).warning(
                f"Entry point '{ep.name}' does not point to a Brick subclass"
            )
            return 0
        self._registry.register(ep.name, obj)
        return 1
