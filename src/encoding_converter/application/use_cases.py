"""Application use-cases orchestrating a directory conversion run."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from encoding_converter.adapters.detectors import ChardetEncodingDetector
from encoding_converter.adapters.progress import NullProgressReporter
from encoding_converter.adapters.transcoders import CodecTranscoder
from encoding_converter.application.options import (
    DEFAULT_TARGET_ENCODING,
    OUTPUT_DIR_NAME,
    RunOptions,
)
from encoding_converter.application.ports import (
    Archiver,
    EncodingDetector,
    ProgressReporter,
    Transcoder,
)
from encoding_converter.application.results import RunResult
from encoding_converter.classify import list_candidates
from encoding_converter.convert import process_entries
from encoding_converter.errors import ConfigError
from encoding_converter.infrastructure.archive import ZipArchiver
from encoding_converter.schemas import RunConfig
from encoding_converter.validate import prepare_output_dir, validate_source_dir

logger = logging.getLogger(__name__)


def build_run_options(
    *,
    source_dir: Path,
    target_encoding: str = DEFAULT_TARGET_ENCODING,
    copy_unchanged: bool = False,
    compress: bool = False,
    cleanup_after_compress: bool = False,
    max_workers: int = 1,
) -> RunOptions:
    """Build typed run options from command/API params."""
    try:
        config = RunConfig(
            source_dir=source_dir,
            target_encoding=target_encoding,
            copy_unchanged=copy_unchanged,
            compress=compress,
            cleanup_after_compress=cleanup_after_compress,
            max_workers=max_workers,
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid run parameters: {exc}") from exc

    return RunOptions(
        source_dir=config.source_dir,
        output_dir=config.source_dir / OUTPUT_DIR_NAME,
        target_encoding=config.target_encoding,
        copy_unchanged=config.copy_unchanged,
        compress=config.compress,
        cleanup_after_compress=config.cleanup_after_compress,
        max_workers=config.max_workers,
    )


def run_batch(
    options: RunOptions,
    *,
    detector: EncodingDetector | None = None,
    transcoder: Transcoder | None = None,
    progress: ProgressReporter | None = None,
    archiver: Archiver | None = None,
) -> RunResult:
    """Use-case: validate, classify, convert and optionally archive a directory.

    Pre-flight errors (``InvalidSourcePathError``, ``AccessDeniedError``)
    are raised before anything is written. Per-file failures are collected
    in the result. ``ArchiveError`` propagates and leaves processed files
    on disk.
    """
    validate_source_dir(options.source_dir)
    prepare_output_dir(options.output_dir)

    detector = detector or ChardetEncodingDetector()
    transcoder = transcoder or CodecTranscoder()
    progress = progress or NullProgressReporter()
    archiver = archiver or ZipArchiver()

    entries = list_candidates(options.source_dir, detector)
    logger.info("found %d candidate files in %s", len(entries), options.source_dir)

    outcome = process_entries(entries, options, transcoder=transcoder, progress=progress)
    if outcome.failures:
        logger.warning("%d files could not be processed", len(outcome.failures))

    archive_path = None
    if options.compress:
        progress.note("\nCompressing...")
        archive_path = archiver.archive(
            [item.output_path for item in outcome.processed],
            options.output_dir,
            cleanup=options.cleanup_after_compress,
        )
        progress.note("Done")
    elif options.cleanup_after_compress:
        logger.warning("cleanup requested without compression; keeping processed files")

    return RunResult(
        output_dir=options.output_dir,
        processed=outcome.processed,
        skipped=outcome.skipped,
        failures=outcome.failures,
        archive_path=archive_path,
    )
