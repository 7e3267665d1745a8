"""Shared type aliases for converter modules."""

from __future__ import annotations

from typing import Literal

type ProcessAction = Literal["copy", "transcode"]
