#!/usr/bin/env python3
"""
bricklayer CLI input validators

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from collections.abc import Sequence
from pathlib import Path

from .display import console


def validate_inputs(config: str | None, params: Sequence[str] | None) -> list[str]:
    """
    Validate all user inputs.

    Args:
        config: Config file path
        params: KEY=VALUE pairs given with --param

    Returns:
        List of validation error messages (empty if all valid)
    """
    errors: list[str] = []

    errors.extend(validate_config_input(config))
    errors.extend(validate_params_input(params))

    return errors


def validate_config_input(config: str | None) -> list[str]:
    errors: list[str] = []
    if config:
        config_path = Path(config)
        if not config_path.exists():
            errors.append(f"Config file does not exist: {config}")
        elif not config_path.is_file():
            errors.append(f"Config path is not a file: {config}")
        elif config_path.suffix.lower() != ".json":
            errors.append(f"Config file must be JSON: {config}")
    return errors


def validate_params_input(params: Sequence[str] | None) -> list[str]:
    errors: list[str] = []
    for pair in params or ():
        key, sep, _ = pair.partition("=")
        if not sep:
            errors.append(f"Parameter must be KEY=VALUE: {pair}")
        elif not key.strip():
            errors.append(f"Parameter key cannot be empty: {pair}")
    return errors


def display_validation_errors(validation_errors: list[str]) -> None:
    for error in validation_errors:
        console.print(f"[red]Error: {error}[/red]")
