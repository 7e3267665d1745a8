"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class EncodingDetector(Protocol):
    """Guess the character encoding of a byte sample."""

    def detect(self, sample: bytes) -> str | None:
        """Return an encoding label, or ``None`` when no guess is possible."""


class Transcoder(Protocol):
    """Re-encode bytes from one character encoding to another."""

    def transcode(self, data: bytes, source_encoding: str, target_encoding: str) -> bytes:
        """Return ``data`` re-encoded; raise ``TranscodeError`` on failure."""


class ProgressReporter(Protocol):
    """Receive progress updates from the processing stage.

    ``advance`` may be called from worker threads.
    """

    def start(self, total: int) -> None:
        """Announce the number of entries about to be processed."""

    def advance(self, name: str, status: str | None = None) -> None:
        """Record one finished entry; ``status`` is ``None`` for skipped ones."""

    def note(self, message: str) -> None:
        """Emit a free-form status message."""

    def close(self) -> None:
        """Finish reporting."""


class Archiver(Protocol):
    """Bundle processed files into a single archive."""

    def archive(
        self,
        files: Sequence[Path],
        output_dir: Path,
        *,
        cleanup: bool = False,
    ) -> Path:
        """Write the archive and return its path."""
