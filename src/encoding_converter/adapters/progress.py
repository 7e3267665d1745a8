"""Progress reporter adapters."""

from __future__ import annotations

import threading

from tqdm import tqdm


class NullProgressReporter:
    """Reporter that discards every update."""

    def start(self, total: int) -> None:
        del total

    def advance(self, name: str, status: str | None = None) -> None:
        del name, status

    def note(self, message: str) -> None:
        del message

    def close(self) -> None:
        return None


class TqdmProgressReporter:
    """Progress bar plus one numbered line per written file.

    Parameters
    ----------
    disable : bool | None, default=None
        Passed to ``tqdm``; ``None`` hides the bar when output is not a TTY.
        Numbered lines are printed either way.
    """

    def __init__(self, *, disable: bool | None = None) -> None:
        self._disable = disable
        self._lock = threading.Lock()
        self._bar: tqdm | None = None
        self._count = 0

    @property
    def count(self) -> int:
        """Number of numbered lines printed so far."""
        return self._count

    def start(self, total: int) -> None:
        with self._lock:
            self._count = 0
            self._bar = tqdm(total=total, unit="file", disable=self._disable, leave=False)

    def advance(self, name: str, status: str | None = None) -> None:
        with self._lock:
            if status is not None:
                self._count += 1
                tqdm.write(f"{self._count}\t {status} \t {name}")
            if self._bar is not None:
                self._bar.update(1)

    def note(self, message: str) -> None:
        with self._lock:
            tqdm.write(message)

    def close(self) -> None:
        with self._lock:
            if self._bar is not None:
                self._bar.close()
                self._bar = None
