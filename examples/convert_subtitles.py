#!/usr/bin/env python3
"""Example: convert a folder of legacy-encoded subtitles to UTF-8 and zip them."""

from __future__ import annotations

import tempfile
import zipfile
from pathlib import Path

from encoding_converter import convert_directory
from encoding_converter.adapters.progress import TqdmProgressReporter

SUBTITLES = {
    "episode01.srt": ("1\n00:00:01,000 --> 00:00:03,000\nÀ bientôt, chère amie.\n", "cp1252"),
    "episode02.srt": ("1\n00:00:01,000 --> 00:00:03,000\nDéjà vu, garçon !\n", "latin-1"),
    "notes.txt": ("Sous-titres vérifiés.\n", "utf-8"),
}


def main() -> None:
    """Write sample files, convert them, and print the archived subtitles."""
    with tempfile.TemporaryDirectory() as tmp:
        source = Path(tmp)
        for name, (text, encoding) in SUBTITLES.items():
            (source / name).write_bytes(text.encode(encoding))

        result = convert_directory(
            source,
            copy_unchanged=True,
            compress=True,
            progress=TqdmProgressReporter(),
        )
        if not result.ok:
            for failure in result.failures:
                print(f"FAIL: {failure.source_path.name}: {failure.reason}")
            raise SystemExit(1)

        if result.archive_path is None:
            raise SystemExit("FAIL: archive was not written.")
        with zipfile.ZipFile(result.archive_path) as bundle:
            for name in sorted(bundle.namelist()):
                print(f"{name}: {bundle.read(name).decode('utf-8').splitlines()[-1]}")


if __name__ == "__main__":
    main()
