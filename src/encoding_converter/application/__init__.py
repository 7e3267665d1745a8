"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from encoding_converter.application.options import RunOptions
from encoding_converter.application.ports import (
    Archiver,
    EncodingDetector,
    ProgressReporter,
    Transcoder,
)
from encoding_converter.application.results import (
    FileEntry,
    FileFailure,
    ProcessedFile,
    RunResult,
)


def build_run_options(
    *,
    source_dir: Path,
    target_encoding: str = "UTF-8",
    copy_unchanged: bool = False,
    compress: bool = False,
    cleanup_after_compress: bool = False,
    max_workers: int = 1,
) -> RunOptions:
    """Build typed run options via lazy use-case import."""
    from encoding_converter.application.use_cases import build_run_options as _impl

    return _impl(
        source_dir=source_dir,
        target_encoding=target_encoding,
        copy_unchanged=copy_unchanged,
        compress=compress,
        cleanup_after_compress=cleanup_after_compress,
        max_workers=max_workers,
    )


def run_batch(
    options: RunOptions,
    *,
    detector: EncodingDetector | None = None,
    transcoder: Transcoder | None = None,
    progress: ProgressReporter | None = None,
    archiver: Archiver | None = None,
) -> RunResult:
    """Run a directory conversion via lazy use-case import."""
    from encoding_converter.application.use_cases import run_batch as _impl

    return _impl(
        options,
        detector=detector,
        transcoder=transcoder,
        progress=progress,
        archiver=archiver,
    )


__all__ = [
    "FileEntry",
    "FileFailure",
    "ProcessedFile",
    "RunOptions",
    "RunResult",
    "build_run_options",
    "run_batch",
]
