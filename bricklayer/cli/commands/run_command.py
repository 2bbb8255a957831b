#!/usr/bin/env python3
"""
bricklayer CLI Commands - Run Command

Builds a pipeline from configured brick names and invokes it once.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

from typing import Any

from ...bricks.brick import LOGGER_KEY
from ...exceptions import BricklayerError
from ...pipeline import Pipeline
from ..display import display_result
from ..pipeline_runner import parse_param_pairs
from .base import Command


class RunCommand(Command):
    """
    Command running a brick pipeline.

    Brick names come from the config file's pipeline.bricks list followed
    by any --brick options, in that order. The params bag is seeded from
    the config's params section, then from --param pairs, and carries the
    context logger under LOGGER_KEY unless a logger is already present.
    """

    def execute(self, args: dict[str, Any]) -> int:
        try:
            config = self._get_config(args.get("config"))
            names = config.brick_names + list(args.get("bricks") or ())
            if not names:
                self.context.console.print(
                    "[yellow]No bricks configured, running an empty pipeline[/yellow]"
                )

            factories = self._build_registry().resolve_all(names)

            params = config.initial_params
            params.update(parse_param_pairs(args.get("params")))
            params.setdefault(LOGGER_KEY, self.context.logger)

            self.context.logger.info(f"Running pipeline: {' -> '.join(names) or '<empty>'}")
            result = Pipeline.run(factories, params)
        except BricklayerError as e:
            self.context.console.print(f"[red]Error: {e}[/red]")
            return 1

        if not self.context.quiet:
            display_result(result, self.context.console)
        return 0
