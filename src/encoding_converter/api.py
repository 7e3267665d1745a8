"""Public directory conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from encoding_converter.application.ports import ProgressReporter
from encoding_converter.application.results import RunResult
from encoding_converter.application.use_cases import build_run_options
from encoding_converter.application.use_cases import run_batch


def convert_directory(
    source_dir: Path,
    target_encoding: str = "UTF-8",
    copy_unchanged: bool = False,
    compress: bool = False,
    cleanup_after_compress: bool = False,
    max_workers: int = 1,
    progress: Optional[ProgressReporter] = None,
) -> RunResult:
    """Convert the text and subtitle files of a directory into ``processed/``."""
    options = build_run_options(
        source_dir=Path(source_dir),
        target_encoding=target_encoding,
        copy_unchanged=copy_unchanged,
        compress=compress,
        cleanup_after_compress=cleanup_after_compress,
        max_workers=max_workers,
    )
    return run_batch(options, progress=progress)
