"""Console output helper writing to standard output."""

from __future__ import annotations

import sys
from typing import IO, Optional

_MAX_FORMATTED_LENGTH = 8192 - 2

_singleton: Optional["Console"] = None


class Console:
    """Writes text to a stream; by default the current ``sys.stdout``."""

    def __init__(self, stream: Optional[IO[str]] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdout

    def flush(self) -> None:
        self.stream.flush()

    def newline(self) -> None:
        self.stream.write("\n")

    def printf(self, format: str, *args: object) -> None:
        """Write ``format % args``, clipped to the console's line limit."""
        text = format % args if args else format
        self.stream.write(text[:_MAX_FORMATTED_LENGTH])

    def print(self, string: str) -> None:
        self.stream.write(string)

    def print_int(self, value: int) -> None:
        self.stream.write(str(int(value)))

    def print_unsigned(self, value: int) -> None:
        self.stream.write(str(int(value) & 0xFFFFFFFF))

    def println(self, string: str) -> None:
        self.stream.write(f"{string}\n")


def singleton() -> Console:
    """Return the shared console, creating it on first use."""
    global _singleton
    if _singleton is None:
        _singleton = Console()
    return _singleton