"""Pydantic schemas for runtime validation of run parameters."""

from __future__ import annotations

import codecs
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RunConfig(BaseModel):
    """Validated input for a directory conversion run."""

    model_config = ConfigDict(extra="forbid")

    source_dir: Path
    target_encoding: str = "UTF-8"
    copy_unchanged: bool = False
    compress: bool = False
    cleanup_after_compress: bool = False
    max_workers: int = Field(default=1, ge=1)

    @field_validator("target_encoding")
    @classmethod
    def _validate_target_encoding(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("target_encoding cannot be empty.")
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding '{value}'.") from exc
        return value
