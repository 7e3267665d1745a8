"""Encoding detector adapters."""

from __future__ import annotations

import chardet


class ChardetEncodingDetector:
    """Detect encodings with ``chardet``'s universal detector."""

    def detect(self, sample: bytes) -> str | None:
        """Return chardet's best guess for ``sample``.

        Parameters
        ----------
        sample : bytes
            Leading bytes of a file; may be shorter than the usual sample size.

        Returns
        -------
        str | None
            Encoding label such as ``"utf-8"`` or ``"ISO-8859-1"``, or
            ``None`` if chardet has no guess (e.g. binary data).
        """
        if not sample:
            return "ascii"
        return chardet.detect(sample).get("encoding")
