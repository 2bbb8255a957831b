"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import logging
from typing import Any

import pytest


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: end-to-end pipeline and CLI tests")


@pytest.fixture(autouse=True, scope="function")
def reset_bricklayer_logger():
    """Drop handlers installed on the bricklayer logger during a test."""
    yield
    bricklayer_logger = logging.getLogger("bricklayer")
    for handler in list(bricklayer_logger.handlers):
        bricklayer_logger.removeHandler(handler)
        handler.close()
    bricklayer_logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def clear_log_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BRICKLAYER_LOG_LEVEL", raising=False)


class RecordingLogger:
    """Logger-like sink collecting info messages."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def info(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def bag() -> dict[str, Any]:
    return {}
