"""Batch character-encoding conversion for text and subtitle files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from encoding_converter.application.ports import ProgressReporter
    from encoding_converter.application.results import RunResult

__version__ = "0.1.0"


def convert_directory(
    source_dir: Path,
    target_encoding: str = "UTF-8",
    copy_unchanged: bool = False,
    compress: bool = False,
    cleanup_after_compress: bool = False,
    max_workers: int = 1,
    progress: ProgressReporter | None = None,
) -> RunResult:
    """Convert every text/subtitle file of a directory to one encoding.

    Parameters
    ----------
    source_dir : Path
        Directory to scan (not recursive). Results go to
        ``source_dir / "processed"``.
    target_encoding : str, default="UTF-8"
        Encoding of the written files.
    copy_unchanged : bool, default=False
        Copy files that are already in the target encoding.
    compress : bool, default=False
        Bundle the written files into ``processed/archive.zip``.
    cleanup_after_compress : bool, default=False
        Delete the individual written files once the archive exists.
    max_workers : int, default=1
        Maximum number of files converted concurrently.
    progress : ProgressReporter, optional
        Receives one update per candidate file.

    Returns
    -------
    RunResult
        Written, skipped and failed files plus the archive path.
    """
    from .api import convert_directory as _impl

    return _impl(
        source_dir=source_dir,
        target_encoding=target_encoding,
        copy_unchanged=copy_unchanged,
        compress=compress,
        cleanup_after_compress=cleanup_after_compress,
        max_workers=max_workers,
        progress=progress,
    )


__all__ = ["__version__", "convert_directory"]
