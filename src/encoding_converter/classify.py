"""Candidate discovery: MIME filtering and encoding detection."""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path

from encoding_converter.application.ports import EncodingDetector
from encoding_converter.application.results import FileEntry

logger = logging.getLogger(__name__)

SAMPLE_SIZE = 4096
ALLOWED_MIME_TYPES = frozenset({"text/plain", "application/x-subrip"})

# The only extensions treated as plain text. Python maps source files such
# as .c, .bat and .pl to text/plain too; those stay out.
TEXT_EXTENSIONS = frozenset(
    {".txt", ".text", ".conf", ".def", ".list", ".log", ".in", ".ini"}
)
SUBRIP_EXTENSION = ".srt"


def _build_mime_table() -> mimetypes.MimeTypes:
    # Built-in defaults only; system mime.types files are not read.
    table = mimetypes.MimeTypes()
    for types_map in table.types_map:
        for extension, mime_type in list(types_map.items()):
            if mime_type == "text/plain" and extension not in TEXT_EXTENSIONS:
                del types_map[extension]
    for extension in sorted(TEXT_EXTENSIONS):
        table.add_type("text/plain", extension)
    table.add_type("application/x-subrip", SUBRIP_EXTENSION)
    return table


_MIME_TABLE = _build_mime_table()


def guess_mime_type(path: Path) -> str | None:
    """Guess a MIME type from the file name.

    Compressed files (``notes.txt.gz``) are reported as ``None``.
    """
    mime_type, content_encoding = _MIME_TABLE.guess_type(path.name)
    if content_encoding is not None:
        return None
    return mime_type


def is_candidate(path: Path) -> bool:
    """Return whether ``path`` has one of the allowed MIME types."""
    return guess_mime_type(path) in ALLOWED_MIME_TYPES


def read_sample(path: Path, size: int = SAMPLE_SIZE) -> bytes:
    """Read up to ``size`` leading bytes of a file."""
    with path.open("rb") as handle:
        return handle.read(size)


def iter_source_files(source_dir: Path) -> list[Path]:
    """List regular files directly inside ``source_dir`` (no recursion)."""
    return sorted(path for path in source_dir.iterdir() if path.is_file())


def list_candidates(source_dir: Path, detector: EncodingDetector) -> list[FileEntry]:
    """Classify the files of ``source_dir``.

    Parameters
    ----------
    source_dir : Path
        Directory to scan. Subdirectories, including the output
        directory, are never entered.
    detector : EncodingDetector
        Detector applied to the first ``SAMPLE_SIZE`` bytes of each file.

    Returns
    -------
    list[FileEntry]
        One entry per candidate file, sorted by file name.
    """
    entries: list[FileEntry] = []
    for path in iter_source_files(source_dir):
        if not is_candidate(path):
            logger.debug("ignoring %s (type %s)", path.name, guess_mime_type(path))
            continue
        try:
            sample = read_sample(path)
        except OSError as exc:
            logger.warning("cannot read %s: %s", path, exc)
            entries.append(
                FileEntry(source_path=path, detected_encoding=None, read_error=str(exc))
            )
            continue
        encoding = detector.detect(sample)
        logger.debug("detected %s for %s", encoding, path.name)
        entries.append(FileEntry(source_path=path, detected_encoding=encoding))
    return entries
