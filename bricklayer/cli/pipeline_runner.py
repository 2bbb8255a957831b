#!/usr/bin/env python3
"""
Helpers for running pipelines from the command line.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

import json
import sys
import traceback
from collections.abc import Sequence
from typing import Any

from .display import console


def parse_param_value(raw: str) -> Any:
    """Decode a --param value as JSON, keeping it as a plain string otherwise."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def parse_param_pairs(pairs: Sequence[str] | None) -> dict[str, Any]:
    """
    Turn KEY=VALUE pairs into a dict.

    Pairs are expected to be validated already; later keys win.
    """
    params: dict[str, Any] = {}
    for pair in pairs or ():
        key, _, value = pair.partition("=")
        params[key.strip()] = parse_param_value(value)
    return params


def handle_main_error(e: Exception, verbose: bool) -> None:
    """
    Handle errors in main function.

    Args:
        e: Exception that occurred
        verbose: Enable verbose error output
    """
    console.print(f"[red]Error: {str(e)}[/red]")
    if verbose:
        traceback.print_exc()
    sys.exit(1)
