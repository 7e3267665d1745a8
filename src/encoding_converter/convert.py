"""Per-file copy/transcode stage."""

from __future__ import annotations

import codecs
import logging
import shutil
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path

from encoding_converter.application.options import RunOptions
from encoding_converter.application.ports import ProgressReporter, Transcoder
from encoding_converter.application.results import (
    FileEntry,
    FileFailure,
    ProcessedFile,
    ProcessOutcome,
)
from encoding_converter.errors import ConfigError, TranscodeError

logger = logging.getLogger(__name__)

_ASCII_PROBE = bytes(range(128))


def canonical_encoding(label: str) -> str:
    """Return Python's canonical codec name for ``label``."""
    return codecs.lookup(label).name


def is_ascii_compatible(label: str) -> bool:
    """Return whether ASCII text is byte-identical in ``label``."""
    try:
        return _ASCII_PROBE.decode("ascii").encode(label) == _ASCII_PROBE
    except (LookupError, UnicodeError):
        return False


def matches_target(detected: str | None, target: str) -> bool:
    """Return whether a file in ``detected`` encoding needs no conversion.

    Labels are compared by canonical codec name, so ``UTF-8``, ``utf8``
    and ``utf_8`` are equal. Pure ASCII content matches any target that
    encodes ASCII unchanged.
    """
    if detected is None:
        return False
    try:
        detected_name = canonical_encoding(detected)
    except LookupError:
        return False
    target_name = canonical_encoding(target)
    if detected_name == target_name:
        return True
    return detected_name == "ascii" and is_ascii_compatible(target_name)


def _process_entry(
    entry: FileEntry,
    options: RunOptions,
    transcoder: Transcoder,
) -> ProcessedFile | None:
    source = entry.source_path
    destination = options.output_dir / source.name

    if matches_target(entry.detected_encoding, options.target_encoding):
        if not options.copy_unchanged:
            logger.debug("skipping %s: already %s", source.name, entry.detected_encoding)
            return None
        shutil.copyfile(source, destination)
        return ProcessedFile(
            source_path=source,
            output_path=destination,
            action="copy",
            source_encoding=entry.detected_encoding,
        )

    if entry.detected_encoding is None:
        raise TranscodeError(f"Could not detect the encoding of {source.name}.")

    # Nothing is written unless the whole file transcodes.
    converted = transcoder.transcode(
        source.read_bytes(), entry.detected_encoding, options.target_encoding
    )
    destination.write_bytes(converted)
    return ProcessedFile(
        source_path=source,
        output_path=destination,
        action="transcode",
        source_encoding=entry.detected_encoding,
    )


def _describe(processed: ProcessedFile, target_encoding: str) -> str:
    if processed.action == "copy":
        return "copy"
    return f"{processed.source_encoding} -> {target_encoding}"


def _run_entry(
    entry: FileEntry,
    options: RunOptions,
    transcoder: Transcoder,
    progress: ProgressReporter,
) -> ProcessedFile | FileFailure | None:
    name = entry.source_path.name
    if entry.read_error is not None:
        progress.advance(name, "failed")
        return FileFailure(
            source_path=entry.source_path,
            reason=f"Cannot read {name}: {entry.read_error}",
        )
    try:
        processed = _process_entry(entry, options, transcoder)
    except (TranscodeError, OSError) as exc:
        logger.warning("failed to process %s: %s", entry.source_path, exc)
        progress.advance(name, "failed")
        return FileFailure(source_path=entry.source_path, reason=str(exc))

    if processed is None:
        progress.advance(name)
    else:
        progress.advance(name, _describe(processed, options.target_encoding))
    return processed


def process_entries(
    entries: Sequence[FileEntry],
    options: RunOptions,
    *,
    transcoder: Transcoder,
    progress: ProgressReporter,
) -> ProcessOutcome:
    """Copy or transcode every entry into the output directory.

    Parameters
    ----------
    entries : Sequence[FileEntry]
        Classified candidate files.
    options : RunOptions
        Run options; ``max_workers`` bounds concurrent conversions.
    transcoder : Transcoder
        Byte-level re-encoder.
    progress : ProgressReporter
        Advanced exactly once per entry.

    Returns
    -------
    ProcessOutcome
        Processed, skipped and failed entries, each in input order.

    Raises
    ------
    ConfigError
        If ``options.target_encoding`` is not a known codec. Nothing is
        processed in that case.

    Notes
    -----
    A failing entry is logged and recorded; it never stops the others.
    All work has finished when this function returns.
    """
    try:
        canonical_encoding(options.target_encoding)
    except LookupError as exc:
        raise ConfigError(f"Unknown target encoding '{options.target_encoding}'.") from exc

    run = partial(_run_entry, options=options, transcoder=transcoder, progress=progress)

    progress.start(len(entries))
    try:
        with ThreadPoolExecutor(max_workers=options.max_workers) as executor:
            results = list(executor.map(run, entries))
    finally:
        progress.close()

    processed: list[ProcessedFile] = []
    skipped: list[Path] = []
    failures: list[FileFailure] = []
    for entry, result in zip(entries, results):
        if result is None:
            skipped.append(entry.source_path)
        elif isinstance(result, FileFailure):
            failures.append(result)
        else:
            processed.append(result)

    return ProcessOutcome(
        processed=tuple(processed),
        skipped=tuple(skipped),
        failures=tuple(failures),
    )
