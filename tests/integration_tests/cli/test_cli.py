"""Integration tests running the CLI on real directories."""

from __future__ import annotations

import zipfile
from pathlib import Path

from typer.testing import CliRunner

from encoding_converter.cli import cli as cli_module

runner = CliRunner()


def _snapshot(directory: Path) -> dict[str, bytes]:
    return {path.name: path.read_bytes() for path in sorted(directory.iterdir())}


def test_cli_help_smoke() -> None:
    """Verify root help output renders successfully."""
    result = runner.invoke(cli_module.app, ["--help"])
    assert result.exit_code == 0
    assert "Convert plain-text and subtitle files" in result.output


def test_default_run_converts_only_mismatched(scenario_dir: Path) -> None:
    """Transcode a.srt, skip UTF-8 b.txt, ignore c.jpg."""
    result = runner.invoke(cli_module.app, [str(scenario_dir)])

    assert result.exit_code == 0, result.output
    processed = scenario_dir / "processed"
    assert sorted(p.name for p in processed.iterdir()) == ["a.srt"]
    converted = (processed / "a.srt").read_bytes()
    assert converted != (scenario_dir / "a.srt").read_bytes()
    converted.decode("utf-8")
    assert "Processed 1, skipped 1, failed 0" in result.output


def test_copy_run_adds_identical_copy(scenario_dir: Path) -> None:
    """Copy b.txt byte for byte alongside the transcoded a.srt."""
    result = runner.invoke(cli_module.app, [str(scenario_dir), "--copy"])

    assert result.exit_code == 0, result.output
    processed = scenario_dir / "processed"
    assert sorted(p.name for p in processed.iterdir()) == ["a.srt", "b.txt"]
    assert (processed / "b.txt").read_bytes() == (scenario_dir / "b.txt").read_bytes()
    assert not (processed / "c.jpg").exists()


def test_compress_archive_matches_outputs(scenario_dir: Path) -> None:
    """Write archive.zip whose members equal the processed files."""
    result = runner.invoke(cli_module.app, [str(scenario_dir), "--copy", "--compress"])

    assert result.exit_code == 0, result.output
    processed = scenario_dir / "processed"
    with zipfile.ZipFile(processed / "archive.zip") as bundle:
        members = {name: bundle.read(name) for name in bundle.namelist()}
    assert members == {
        name: processed.joinpath(name).read_bytes() for name in ("a.srt", "b.txt")
    }
    assert "Compressing..." in result.output


def test_compress_cleanup_leaves_only_archive(scenario_dir: Path) -> None:
    """Remove individual outputs once they are archived."""
    result = runner.invoke(
        cli_module.app, [str(scenario_dir), "--copy", "--compress", "--cleanup"]
    )

    assert result.exit_code == 0, result.output
    processed = scenario_dir / "processed"
    assert [p.name for p in processed.iterdir()] == ["archive.zip"]
    with zipfile.ZipFile(processed / "archive.zip") as bundle:
        assert sorted(bundle.namelist()) == ["a.srt", "b.txt"]
        assert bundle.read("b.txt") == (scenario_dir / "b.txt").read_bytes()


def test_rerun_is_idempotent(scenario_dir: Path) -> None:
    """Produce byte-identical output directories on repeated runs."""
    args = [str(scenario_dir), "--copy", "--compress", "--workers", "2"]

    first = runner.invoke(cli_module.app, args)
    snapshot = _snapshot(scenario_dir / "processed")
    second = runner.invoke(cli_module.app, args)

    assert first.exit_code == 0, first.output
    assert second.exit_code == 0, second.output
    assert _snapshot(scenario_dir / "processed") == snapshot


def test_archive_holds_only_files_written_this_run(scenario_dir: Path) -> None:
    """Leave an earlier copy on disk but keep it out of the new archive."""
    first = runner.invoke(cli_module.app, [str(scenario_dir), "--copy"])
    second = runner.invoke(cli_module.app, [str(scenario_dir), "--compress"])

    assert first.exit_code == 0, first.output
    assert second.exit_code == 0, second.output
    processed = scenario_dir / "processed"
    assert (processed / "b.txt").exists()
    with zipfile.ZipFile(processed / "archive.zip") as bundle:
        assert bundle.namelist() == ["a.srt"]


def test_invalid_directory_exits_one(tmp_path: Path) -> None:
    """Exit with status 1 and create nothing for a missing directory."""
    missing = tmp_path / "missing"
    result = runner.invoke(cli_module.app, [str(missing)])

    assert result.exit_code == 1
    assert "Invalid path" in result.output
    assert not missing.exists()
