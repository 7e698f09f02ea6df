"""A bounded, newest-first log of status messages."""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Callable, Optional

WELCOME_TEXT = "Welcome! Setup or join a game."
DEFAULT_LIMIT = 20


def _now() -> str:
    return datetime.now().strftime("%H:%M:%S")


class StatusLog:
    """Status text where each new message goes on top, time-stamped.

    Once there are more than ``limit`` lines, only the newest ``limit`` are kept.
    """

    def __init__(
        self,
        text: str = WELCOME_TEXT,
        limit: int = DEFAULT_LIMIT,
        clock: Optional[Callable[[], str]] = None,
    ) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.text = text
        self.limit = limit
        self._clock = clock or _now
        self._lock = threading.Lock()

    @property
    def lines(self) -> list[str]:
        """The non-empty lines of the log, newest first."""
        return [line for line in self.text.split("\n") if line]

    def log(self, message: str) -> None:
        """Put a time-stamped message on top of the log."""
        with self._lock:
            self.text = f"{self._clock()}: {message}\n{self.text}"
            lines = self.lines
            if len(lines) > self.limit:
                self.text = "".join(f"{line}\n" for line in lines[: self.limit])

    def replace(self, text: str) -> None:
        """Replace the whole log with the given text."""
        with self._lock:
            self.text = text

    def __str__(self) -> str:
        return self.text