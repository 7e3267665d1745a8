"""ZIP archiver for processed files."""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Sequence
from pathlib import Path

from encoding_converter.errors import ArchiveError

logger = logging.getLogger(__name__)

ARCHIVE_NAME = "archive.zip"

# Fixed member timestamp keeps reruns byte-identical.
_MEMBER_TIMESTAMP = (1980, 1, 1, 0, 0, 0)


class ZipArchiver:
    """Write processed files into a DEFLATE-compressed ``archive.zip``."""

    def archive(
        self,
        files: Sequence[Path],
        output_dir: Path,
        *,
        cleanup: bool = False,
    ) -> Path:
        """Bundle ``files`` into ``output_dir / ARCHIVE_NAME``.

        Only ``files`` are archived. Leftovers from earlier runs in
        ``output_dir`` are neither added nor removed.

        Parameters
        ----------
        files : Sequence[Path]
            Processed files; stored under their base names, read from disk.
        output_dir : Path
            Directory that receives the archive.
        cleanup : bool, default=False
            Delete ``files`` once the archive has been written.

        Returns
        -------
        Path
            Path to the written archive.

        Raises
        ------
        ArchiveError
            If the archive cannot be written (no file is deleted) or if
            cleanup fails after a successful write.
        """
        archive_path = output_dir / ARCHIVE_NAME
        try:
            with zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED) as bundle:
                for path in files:
                    info = zipfile.ZipInfo(path.name, date_time=_MEMBER_TIMESTAMP)
                    info.compress_type = zipfile.ZIP_DEFLATED
                    info.external_attr = 0o644 << 16
                    bundle.writestr(info, path.read_bytes())
        except (OSError, zipfile.LargeZipFile) as exc:
            archive_path.unlink(missing_ok=True)
            raise ArchiveError(f"Failed to write {archive_path}: {exc}") from exc

        logger.debug("archived %d files into %s", len(files), archive_path)
        if cleanup:
            try:
                for path in files:
                    path.unlink()
            except OSError as exc:
                raise ArchiveError(
                    f"Archive {archive_path} written but cleanup failed: {exc}"
                ) from exc
        return archive_path
