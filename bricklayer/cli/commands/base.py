#!/usr/bin/env python3
"""
bricklayer CLI Commands - Base Abstractions

Command Pattern implementation for bricklayer CLI commands.

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

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from rich.console import Console

from ...config import Config
from ...registry import BrickRegistry, EntryPointLoader
from ...utils.logger import configure_logging_levels, setup_logger


@dataclass
class CommandContext:
    """
    Shared context for all commands.

    Attributes:
        console: Rich console for formatted output
        logger: Logger instance, also handed to bricks through the params bag
        config: Application configuration object
        verbose: Flag for verbose output mode
        quiet: Flag for suppressing non-critical output
    """

    console: Console
    logger: Any
    config: Config | None = None
    verbose: bool = False
    quiet: bool = False

    @classmethod
    def create(
        cls,
        config: Config | None = None,
        verbose: bool = False,
        quiet: bool = False,
    ) -> "CommandContext":
        """
        Factory method to create a CommandContext with proper initialization.

        Args:
            config: Optional configuration object
            verbose: Enable verbose output
            quiet: Suppress non-critical output

        Returns:
            Configured CommandContext instance
        """
        config = config or Config()
        logger = setup_logger(level=config.log_level, log_file=config.log_file)
        if verbose or quiet:
            configure_logging_levels(verbose, quiet)

        return cls(
            console=Console(),
            logger=logger,
            config=config,
            verbose=verbose,
            quiet=quiet,
        )


class Command(ABC):
    """
    Abstract base class for all CLI commands.

    Each command encapsulates one CLI operation and returns an exit code.
    """

    def __init__(self, context: CommandContext | None = None):
        self._context = context

    @abstractmethod
    def execute(self, args: dict[str, Any]) -> int:
        """
        Execute the command with provided arguments.

        Args:
            args: Dictionary of command arguments (from Click)

        Returns:
            Exit code (0 for success, non-zero for failure)
        """

    @property
    def context(self) -> CommandContext:
        if self._context is None:
            self._context = CommandContext.create()
        return self._context

    @context.setter
    def context(self, value: CommandContext) -> None:
        self._context = value

    def _get_config(self, config_path: str | None = None) -> Config:
        """Load configuration from path or use context config."""
        if config_path:
            return Config(config_path)
        if self.context.config is not None:
            return self.context.config
        return Config()

    def _build_registry(self) -> BrickRegistry:
        """Registry with built-in bricks plus those published through entry points."""
        registry = BrickRegistry()
        loaded = EntryPointLoader(registry).load()
        if loaded:
            self.context.logger.debug(f"Loaded {loaded} brick(s) from entry points")
        return registry
