"""Tests for entry point brick loading."""

from __future__ import annotations

from typing import Any

import pytest

from bricklayer.bricks.brick import Brick
from bricklayer.registry import BrickRegistry, EntryPointLoader
from bricklayer.registry import entry_points as entry_points_module


class _PluginBrick(Brick):
    def version(self) -> str:
        return "1.2"


class _FakeEntryPoint:
    def __init__(self, name: str, obj: Any = None, error: Exception | None = None) -> None:
        self.name = name
        self._obj = obj
        self._error = error

    def load(self) -> Any:
        if self._error is not None:
            raise self._error
        return self._obj


def _patch_entry_points(monkeypatch: pytest.MonkeyPatch, eps: list[_FakeEntryPoint]) -> None:
    monkeypatch.setattr(entry_points_module, "entry_points", lambda group: eps)


@pytest.mark.unit
def test_load_registers_brick_classes(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_entry_points(monkeypatch, [_FakeEntryPoint("plugin", _PluginBrick)])
    registry = BrickRegistry(include_builtins=False)

    assert EntryPointLoader(registry).load() == 1
    assert registry.get("plugin") is _PluginBrick


@pytest.mark.unit
def test_load_calls_registration_hooks(monkeypatch: pytest.MonkeyPatch) -> None:
    def hook(registry: BrickRegistry) -> None:
        registry.register("hooked", _PluginBrick)

    _patch_entry_points(monkeypatch, [_FakeEntryPoint("hook", hook)])
    registry = BrickRegistry(include_builtins=False)

    assert EntryPointLoader(registry).load() == 1
    assert "hooked" in registry


@pytest.mark.unit
def test_load_skips_broken_entry_points(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_hook(_registry: BrickRegistry) -> None:
        raise RuntimeError("hook failed")

    class NotABrick:
        pass

    _patch_entry_points(
        monkeypatch,
        [
            _FakeEntryPoint("missing", error=ImportError("no module")),
            _FakeEntryPoint("failing", failing_hook),
            _FakeEntryPoint("plain", NotABrick),
            _FakeEntryPoint("value", 42),
            _FakeEntryPoint("good", _PluginBrick),
        ],
    )
    registry = BrickRegistry(include_builtins=False)

    assert EntryPointLoader(registry).load() == 1
    assert registry.names() == ["good"]


@pytest.mark.unit
def test_load_with_no_entry_points(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_entry_points(monkeypatch, [])
    assert EntryPointLoader(BrickRegistry()).load() == 0


@pytest.mark.unit
def test_load_real_group_without_plugins() -> None:
    registry = BrickRegistry(include_builtins=False)
    assert EntryPointLoader(registry).load("bricklayer.tests.no_such_group") == 0
