"""Exception hierarchy for the encoding converter."""

from __future__ import annotations

from pathlib import Path


class EncodingConverterError(Exception):
    """Base error for all converter failures."""

    exit_code = 1


class ConfigError(EncodingConverterError):
    """Raised when run parameters fail validation."""

    exit_code = 2


class InvalidSourcePathError(EncodingConverterError):
    """Raised when the source directory is missing or not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Invalid path: {path}")
        self.path = path


class AccessDeniedError(EncodingConverterError):
    """Raised when the source directory is not readable and writable."""

    def __init__(self, path: Path, user: str) -> None:
        super().__init__(f"Access denied for user {user}: {path}")
        self.path = path
        self.user = user


class TranscodeError(EncodingConverterError):
    """Raised when one file cannot be converted to the target encoding."""


class ArchiveError(EncodingConverterError):
    """Raised when the output archive cannot be written."""
