#!/usr/bin/env python3
"""
Brick Pipeline implementation for bricklayer.

Turns an ordered list of brick factories into a single nested chain.
The first factory becomes the outermost brick and the last one the
innermost, so invoking the result runs the bricks in declared order.

Example:
    >>> app = Pipeline.prepare([LoggerMiddleware, BenchMiddleware, ReportBrick])
    >>> result = app.call({"project": "demo"})

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from collections.abc import Callable, Iterator, Sequence
from typing import Any

from ..__version__ import __version__
from ..bricks.brick import Brick
from ..utils.logger import get_logger

logger = get_logger(__name__)

BrickFactory = Callable[..., Any]


class EmptyBrick(Brick):
    """No-op brick returned when a pipeline is prepared from an empty list."""

    def version(self) -> str:
        return __version__


def iter_chain(brick: Any) -> Iterator[Any]:
    """Yield every brick of a chain, from the outermost to the innermost."""
    current = brick
    while current is not None:
        yield current
        current = getattr(current, "app", None)


class Pipeline:
    """Composer nesting brick factories into one invocable chain."""

    @staticmethod
    def prepare(specs: Sequence[BrickFactory]) -> Any:
        """
        Build the brick chain without running any brick.

        Args:
            specs: Brick factories in execution order. Each one is called
                with no argument for the innermost brick, and with the
                already built inner chain for every other brick.

        Returns:
            The outermost brick, or an EmptyBrick when specs is empty
        """
        app = None
        for factory in reversed(list(specs)):
            if app is None:
                app = factory()
            else:
                app = factory(app)

        if app is None:
            logger.debug("No bricks given, prepared an empty pipeline")
            return EmptyBrick()

        chain = " -> ".join(type(brick).__name__ for brick in iter_chain(app))
        logger.debug(f"Prepared pipeline: {chain}")
        return app

    @classmethod
    def run(
        cls, specs: Sequence[BrickFactory], params: dict[str, Any] | None = None
    ) -> Any:
        """Prepare a fresh chain and invoke it once with the given params bag."""
        bag = params if params is not None else {}
        return cls.prepare(specs).call(bag)
