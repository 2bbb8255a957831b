#!/usr/bin/env python3
"""
Example Brick Implementation

This module shows how to write concrete bricks and compose them with the
built-in middleware into a pipeline.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

# Add parent directory to path for imports (when running as standalone)
import sys
from pathlib import Path
from typing import Any

sys.path.insert(0, str(Path(__file__).parent.parent))

from bricklayer import Brick, Pipeline
from bricklayer.middleware import BenchMiddleware, LoggerMiddleware, StdoutMiddleware


class NormalizeBrick(Brick):
    """Lower-case every name in params['names'] before handing the bag on."""

    def call(self, params: dict[str, Any] | None = None) -> Any:
        super().call(params)
        self.params["names"] = [name.strip().lower() for name in self.params.get("names", [])]
        self.log(f"Normalized {len(self.params['names'])} names")
        return self.app.call(self.params) if self.app is not None else self.params["names"]

    def version(self) -> str:
        return "1.0.0"


class CountBrick(Brick):
    """Innermost brick: count occurrences of each name."""

    def call(self, params: dict[str, Any] | None = None) -> Any:
        super().call(params)
        counts: dict[str, int] = {}
        for name in self.params.get("names", []):
            counts[name] = counts.get(name, 0) + 1
        return counts

    def version(self) -> str:
        return "1.0.0"


PIPELINE = [LoggerMiddleware, StdoutMiddleware, BenchMiddleware, NormalizeBrick, CountBrick]


def main() -> None:
    params = {"names": ["Ada", " ada", "Grace", "Linus "]}
    Pipeline.run(PIPELINE, params)
    print(f"Timings: {params['bench']}")


if __name__ == "__main__":
    main()
