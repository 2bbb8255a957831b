"""Tests for brick resolution and the brick registry."""

from __future__ import annotations

import sys
import textwrap
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console

from bricklayer.bricks.brick import Brick
from bricklayer.cli.display import create_bricks_table
from bricklayer.exceptions import BrickLoadError
from bricklayer.middleware import BenchMiddleware, LoggerMiddleware, StdoutMiddleware
from bricklayer.registry import BUILTIN_BRICKS, BrickRegistry, resolve_brick


class _UnversionedBrick(Brick):
    pass


class _ReportBrick(Brick):
    def version(self) -> str:
        return "3.0"


@pytest.fixture
def brick_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Write an importable module holding a brick and a non-brick object."""
    module_name = "sample_bricks_mod"
    (tmp_path / f"{module_name}.py").write_text(
        textwrap.dedent(
            """
            from bricklayer.bricks.brick import Brick


            class UploadBrick(Brick):
                def version(self):
                    return "0.9"


            class NotABrick:
                pass


            helper = 42
            """
        )
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    yield module_name
    sys.modules.pop(module_name, None)


@pytest.mark.unit
def test_resolve_brick_with_colon_reference(brick_module: str) -> None:
    cls = resolve_brick(f"{brick_module}:UploadBrick")
    assert cls.__name__ == "UploadBrick"
    assert issubclass(cls, Brick)


@pytest.mark.unit
def test_resolve_brick_with_dotted_reference() -> None:
    assert resolve_brick("bricklayer.middleware.BenchMiddleware") is BenchMiddleware


@pytest.mark.unit
@pytest.mark.parametrize("reference", ["", "NoModule", ":Cls", "module:"])
def test_resolve_brick_rejects_malformed_reference(reference: str) -> None:
    with pytest.raises(BrickLoadError, match="Invalid brick reference"):
        resolve_brick(reference)


@pytest.mark.unit
def test_resolve_brick_missing_module() -> None:
    with pytest.raises(BrickLoadError, match="Cannot import module"):
        resolve_brick("definitely_missing_pkg_xyz:Brick")


@pytest.mark.unit
def test_resolve_brick_missing_attribute(brick_module: str) -> None:
    with pytest.raises(BrickLoadError, match="has no attribute"):
        resolve_brick(f"{brick_module}:Missing")


@pytest.mark.unit
@pytest.mark.parametrize("attr", ["NotABrick", "helper"])
def test_resolve_brick_rejects_non_bricks(brick_module: str, attr: str) -> None:
    with pytest.raises(BrickLoadError, match="is not a Brick subclass"):
        resolve_brick(f"{brick_module}:{attr}")


@pytest.mark.unit
def test_brick_load_error_is_import_error() -> None:
    with pytest.raises(ImportError):
        resolve_brick("definitely_missing_pkg_xyz:Brick")


@pytest.mark.unit
def test_registry_has_builtins() -> None:
    registry = BrickRegistry()

    assert registry.names() == ["bench", "logger", "stdout"]
    assert registry.get("logger") is LoggerMiddleware
    assert registry.get("stdout") is StdoutMiddleware
    assert len(registry) == len(BUILTIN_BRICKS)


@pytest.mark.unit
def test_registry_without_builtins_is_empty() -> None:
    registry = BrickRegistry(include_builtins=False)
    assert len(registry) == 0
    assert registry.get("bench") is None


@pytest.mark.unit
def test_register_and_unregister() -> None:
    registry = BrickRegistry(include_builtins=False)

    registry.register(" report ", _ReportBrick)

    assert "report" in registry
    assert registry.unregister("report") is True
    assert registry.unregister("report") is False


@pytest.mark.unit
def test_register_replaces_existing_name() -> None:
    registry = BrickRegistry()
    registry.register("bench", _ReportBrick)
    assert registry.get("bench") is _ReportBrick


@pytest.mark.unit
@pytest.mark.parametrize("name", ["", "   ", None])
def test_register_rejects_empty_name(name: Any) -> None:
    with pytest.raises(ValueError):
        BrickRegistry().register(name, _ReportBrick)


@pytest.mark.unit
def test_register_rejects_non_callable_factory() -> None:
    with pytest.raises(TypeError):
        BrickRegistry().register("broken", "not callable")  # type: ignore[arg-type]


@pytest.mark.unit
def test_resolve_prefers_registered_name_then_reference(brick_module: str) -> None:
    registry = BrickRegistry()

    factories = registry.resolve_all(["logger", f"{brick_module}:UploadBrick", "bench"])

    assert factories[0] is LoggerMiddleware
    assert factories[1].__name__ == "UploadBrick"
    assert factories[2] is BenchMiddleware


@pytest.mark.unit
def test_resolve_unknown_name_raises() -> None:
    with pytest.raises(BrickLoadError):
        BrickRegistry().resolve("unknown")


@pytest.mark.unit
def test_describe_reports_versions() -> None:
    registry = BrickRegistry(include_builtins=False)
    registry.register("report", _ReportBrick)
    registry.register("draft", _UnversionedBrick)

    rows = {row["name"]: row for row in registry.describe()}

    assert rows["report"]["version"] == "3.0"
    assert rows["report"]["class"].endswith("_ReportBrick")
    assert rows["draft"]["version"] is None


class _BrokenConstructorBrick(Brick):
    def __init__(self, app=None) -> None:
        raise RuntimeError("missing credentials")


class _BrokenVersionBrick(Brick):
    def version(self) -> str:
        raise KeyError("version file")


@pytest.mark.unit
def test_describe_survives_broken_bricks(caplog: pytest.LogCaptureFixture) -> None:
    registry = BrickRegistry(include_builtins=False)
    registry.register("report", _ReportBrick)
    registry.register("ctor", _BrokenConstructorBrick)
    registry.register("ver", _BrokenVersionBrick)

    with caplog.at_level("WARNING", logger="bricklayer.registry"):
        rows = {row["name"]: row for row in registry.describe()}

    assert rows["report"]["version"] == "3.0"
    assert rows["report"]["error"] is None
    assert rows["ctor"]["version"] is None
    assert rows["ctor"]["error"] == "missing credentials"
    assert rows["ver"]["version"] is None
    assert rows["ver"]["error"]
    assert any("Could not read version of brick 'ctor'" in m for m in caplog.messages)


@pytest.mark.unit
def test_bricks_table_marks_unavailable_versions() -> None:
    registry = BrickRegistry(include_builtins=False)
    registry.register("ctor", _BrokenConstructorBrick)
    registry.register("draft", _UnversionedBrick)
    console = Console(width=120, force_terminal=False, record=True)

    console.print(create_bricks_table(registry.describe()))

    text = console.export_text()
    assert "unavailable" in text
    assert "not declared" in text
