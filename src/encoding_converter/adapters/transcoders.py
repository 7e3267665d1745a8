"""Transcoder adapters."""

from __future__ import annotations

from encoding_converter.errors import TranscodeError


class CodecTranscoder:
    """Strict transcoder built on Python's codec registry."""

    def transcode(self, data: bytes, source_encoding: str, target_encoding: str) -> bytes:
        """Decode ``data`` and re-encode it, without replacement characters.

        Raises
        ------
        TranscodeError
            If an encoding is unknown, or the bytes cannot be decoded from the
            source encoding, or the text cannot be represented in the target.
        """
        try:
            text = data.decode(source_encoding)
        except LookupError as exc:
            raise TranscodeError(f"Unsupported source encoding '{source_encoding}'.") from exc
        except UnicodeDecodeError as exc:
            raise TranscodeError(
                f"Invalid {source_encoding} data at byte {exc.start}: {exc.reason}."
            ) from exc

        try:
            return text.encode(target_encoding)
        except LookupError as exc:
            raise TranscodeError(f"Unsupported target encoding '{target_encoding}'.") from exc
        except UnicodeEncodeError as exc:
            raise TranscodeError(
                f"Character {exc.object[exc.start]!r} cannot be encoded in {target_encoding}."
            ) from exc
