#!/usr/bin/env python3
"""
bricklayer CLI Commands - List Bricks Command

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

from ..display import create_bricks_table
from .base import Command


class ListBricksCommand(Command):
    """Command printing every registered brick with its declared version."""

    def execute(self, _args: dict[str, Any]) -> int:
        rows = self._build_registry().describe()
        self.context.console.print(create_bricks_table(rows))
        self.context.console.print(f"\nTotal: {len(rows)} brick(s)")
        return 0
