#!/usr/bin/env python3
"""
bricklayer CLI - Command Line Interface

This module provides the Click-based CLI entry point for bricklayer.
Command execution logic lives in the command classes under cli.commands.

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

import sys
from dataclasses import dataclass
from typing import Any

import click

from .cli.commands import CommandContext, ListBricksCommand, RunCommand, VersionCommand
from .cli.display import console
from .cli.pipeline_runner import handle_main_error
from .cli.validators import display_validation_errors, validate_inputs
from .config import Config


@dataclass
class CLIArgs:
    bricks: tuple[str, ...]
    params: tuple[str, ...]
    config: str | None
    list_bricks: bool
    verbose: bool
    quiet: bool
    version: bool


def main(**kwargs: Any):
    """
    bricklayer - compose bricks into a middleware-style pipeline and run it.
    """
    args = CLIArgs(**kwargs)
    try:
        run_cli(args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Pipeline interrupted by user[/yellow]")
        sys.exit(1)

    except Exception as e:
        handle_main_error(e, args.verbose)


@click.command()
@click.option(
    "-b",
    "--brick",
    "bricks",
    multiple=True,
    help="Brick to append to the pipeline (registered name or module:Class). Repeatable",
)
@click.option(
    "-p",
    "--param",
    "params",
    multiple=True,
    help="Initial params bag entry as KEY=VALUE (VALUE parsed as JSON when possible). Repeatable",
)
@click.option("--config", help="JSON config file path")
@click.option("--list-bricks", is_flag=True, help="List registered bricks and exit")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--quiet", is_flag=True, help="Suppress non-critical output")
@click.option("--version", is_flag=True, help="Show version information and exit")
def cli(**kwargs: Any):
    """Click-based CLI entry point."""
    main(**kwargs)


def run_cli(args: CLIArgs) -> None:
    """Primary CLI workflow separated for clarity and testability."""
    validation_errors = validate_inputs(args.config, args.params)
    if validation_errors:
        display_validation_errors(validation_errors)
        sys.exit(1)

    context = CommandContext.create(
        config=Config(args.config),
        verbose=args.verbose,
        quiet=args.quiet,
    )

    if args.version:
        sys.exit(VersionCommand(context).execute({}))

    if args.list_bricks:
        sys.exit(ListBricksCommand(context).execute({}))

    exit_code = RunCommand(context).execute({"bricks": args.bricks, "params": args.params})
    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
