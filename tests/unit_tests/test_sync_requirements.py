"""Unit tests for the requirements.txt sync script."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest
import typer
from typer.testing import CliRunner

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "sync_requirements.py"

runner = CliRunner()


def _load_script() -> ModuleType:
    spec = importlib.util.spec_from_file_location("sync_requirements", SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _app(module: ModuleType) -> typer.Typer:
    app = typer.Typer()
    app.command()(module.main)
    return app


def test_committed_requirements_are_in_sync() -> None:
    """Pass the check against the repository's own requirements.txt."""
    module = _load_script()

    result = runner.invoke(_app(module), ["--check"])

    assert result.exit_code == 0, result.output
    assert "up to date" in result.output


def test_check_fails_on_stale_file_and_regenerates(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Flag a stale requirements.txt, then rewrite it from pyproject."""
    module = _load_script()
    stale = tmp_path / "requirements.txt"
    stale.write_text("requests\n", encoding="utf-8")
    monkeypatch.setattr(module, "REQUIREMENTS", stale)
    app = _app(module)

    failed = runner.invoke(app, ["--check"])
    written = runner.invoke(app, [])
    rechecked = runner.invoke(app, ["--check"])

    assert failed.exit_code == 1
    assert written.exit_code == 0, written.output
    assert "typer>=0.12" in stale.read_text(encoding="utf-8")
    assert rechecked.exit_code == 0, rechecked.output
