"""Application-layer entry and result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from encoding_converter.types import ProcessAction


@dataclass(frozen=True)
class FileEntry:
    """Candidate file with its detected encoding (``None`` if undetectable).

    ``read_error`` holds the reason the file could not be sampled.
    """

    source_path: Path
    detected_encoding: str | None
    read_error: str | None = None


@dataclass(frozen=True)
class ProcessedFile:
    """File written into the output directory."""

    source_path: Path
    output_path: Path
    action: ProcessAction
    source_encoding: str | None


@dataclass(frozen=True)
class FileFailure:
    """Entry that could not be copied or transcoded."""

    source_path: Path
    reason: str


@dataclass(frozen=True)
class ProcessOutcome:
    """Aggregated result of the per-file processing stage."""

    processed: tuple[ProcessedFile, ...] = ()
    skipped: tuple[Path, ...] = ()
    failures: tuple[FileFailure, ...] = ()


@dataclass(frozen=True)
class RunResult:
    """Structured outcome of a directory run."""

    output_dir: Path
    processed: tuple[ProcessedFile, ...] = ()
    skipped: tuple[Path, ...] = ()
    failures: tuple[FileFailure, ...] = ()
    archive_path: Path | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when every candidate was handled without error."""
        return not self.failures
