"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

OUTPUT_DIR_NAME = "processed"
DEFAULT_TARGET_ENCODING = "UTF-8"


@dataclass(frozen=True)
class RunOptions:
    """Options fixed for the duration of one directory run."""

    source_dir: Path
    output_dir: Path
    target_encoding: str = DEFAULT_TARGET_ENCODING
    copy_unchanged: bool = False
    compress: bool = False
    cleanup_after_compress: bool = False
    max_workers: int = 1
