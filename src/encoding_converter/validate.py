"""Pre-flight checks for source and output directories."""

from __future__ import annotations

import getpass
import logging
import os
from pathlib import Path

from encoding_converter.errors import AccessDeniedError, InvalidSourcePathError

logger = logging.getLogger(__name__)


def _current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "<unknown>"


def validate_source_dir(source_dir: Path) -> Path:
    """Ensure the source directory can be scanned and written into.

    Parameters
    ----------
    source_dir : Path
        Directory to scan for candidate files.

    Returns
    -------
    Path
        The validated directory.

    Raises
    ------
    InvalidSourcePathError
        If the path does not exist or is not a directory.
    AccessDeniedError
        If the directory is not both readable and writable.
    """
    if not source_dir.exists() or not source_dir.is_dir():
        raise InvalidSourcePathError(source_dir)
    if not os.access(source_dir, os.R_OK | os.W_OK | os.X_OK):
        raise AccessDeniedError(source_dir, _current_user())
    return source_dir


def prepare_output_dir(output_dir: Path) -> Path:
    """Create the output directory if it does not exist yet."""
    if output_dir.exists() and not output_dir.is_dir():
        raise InvalidSourcePathError(output_dir)
    if not output_dir.exists():
        logger.debug("creating output directory %s", output_dir)
        output_dir.mkdir()
    return output_dir
