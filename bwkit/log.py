"""Simple logging facility writing to stderr or to a reopened log file."""

from __future__ import annotations

import sys
from typing import IO, Optional

_MAX_LINE_LENGTH = 2048
# Lines are clipped the same way a fixed-size line buffer would clip them.
_MAX_TEXT = _MAX_LINE_LENGTH - 2

_output_file: Optional[IO[str]] = None


class FatalError(Exception):
    """Raised after an error line has been logged; the run cannot go on."""

    def __init__(self, line: str) -> None:
        super().__init__(line)
        self.line = line


def _clip(text: str) -> str:
    return text[:_MAX_TEXT]


def _target() -> IO[str]:
    return _output_file if _output_file is not None else sys.stderr


def _flush() -> None:
    _target().flush()
    if _output_file is not None:
        sys.stderr.flush()
    sys.stdout.flush()


def close() -> None:
    """Close the log file, if any; output goes back to stderr."""
    global _output_file
    if _output_file is not None:
        _output_file.close()
    _output_file = None


def reopen(path: Optional[str]) -> bool:
    """Send log output to ``path``, appending. Returns False if it cannot be opened."""
    global _output_file
    if not path:
        return False
    try:
        handle = open(path, "a", encoding="utf-8")
    except OSError as exc:
        print(f"fopen: {exc.strerror or exc}", file=sys.stderr)
        return False
    close()
    _output_file = handle
    return True


def print_message(message: Optional[str]) -> None:
    """Write ``message`` without a newline."""
    if message is None:
        return
    _target().write(message)


def println(message: Optional[str]) -> None:
    """Write ``message`` followed by a newline."""
    if message is None:
        return
    _target().write(f"{message}\n")


def _emit(kind: str, func_name: str, message: str) -> str:
    line = _clip(f"{kind}({func_name}): {message}")
    println(line)
    _flush()
    return line


def error(func_name: str, message: str) -> None:
    """Log an error line and raise :class:`FatalError`."""
    line = _emit("Error", func_name, message)
    raise FatalError(line)


def error_int(func_name: str, message: str, value: int) -> None:
    error(func_name, _clip(f"{message} = {int(value)}"))


def error_null_parameter(func_name: str) -> None:
    error(func_name, "Null parameter.")


def perror(func_name: str) -> None:
    """Log the operating-system error being handled, then raise :class:`FatalError`."""
    exc = sys.exc_info()[1]
    message = None
    if isinstance(exc, OSError):
        message = exc.strerror or str(exc)
    elif exc is not None:
        message = str(exc) or None
    error(func_name, message or "(C library error)")


def warning(func_name: str, message: str) -> None:
    _emit("Warning", func_name, message)


def warning_int(func_name: str, message: str, value: int) -> None:
    warning(func_name, _clip(f"{message} = {int(value)}"))


def warning_name(func_name: str, message: str, name: Optional[str]) -> None:
    warning(func_name, _clip(f'{message} "{name or ""}"'))


def info(func_name: str, message: str) -> None:
    _emit("Info", func_name, message)


def info_int(func_name: str, message: str, value: int) -> None:
    info(func_name, _clip(f"{message} = {int(value)}"))


def debug(func_name: str, message: str) -> None:
    _emit("Debug", func_name, message)


def debug_string(func_name: str, message: str, string: str) -> None:
    debug(func_name, _clip(f"{message} = {string}"))


def debug_name(func_name: str, message: str, name: str) -> None:
    debug(func_name, _clip(f'{message} "{name}"'))


def debug_int(func_name: str, message: str, value: int) -> None:
    debug(func_name, _clip(f"{message} = {int(value)}"))


def debug_size(func_name: str, message: str, width: int, height: int) -> None:
    debug(func_name, _clip(f"{message} = ({int(width)}x{int(height)})"))


def debug_point(func_name: str, message: str, x: int, y: int) -> None:
    debug(func_name, _clip(f"{message} = ({int(x)},{int(y)})"))


def debug_rgb(func_name: str, message: str, color: int) -> None:
    debug(func_name, _clip(f"{message} = #{int(color) & 0xFFFFFFFF:08x}"))


def debug_rect(func_name: str, message: str, x: int, y: int, width: int, height: int) -> None:
    debug(
        func_name,
        _clip(f"{message} = ({int(x)},{int(y)} {int(width)}x{int(height)})"),
    )