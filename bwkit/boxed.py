"""Boxed integer and floating-point values with C-style conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

_INT64_MASK = (1 << 64) - 1
_INT32_MASK = (1 << 32) - 1


def _to_int64(value: int) -> int:
    value &= _INT64_MASK
    return value - (1 << 64) if value >= 1 << 63 else value


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _atoi(text: str) -> int:
    """Parse a leading decimal integer the way ``atoi`` does; 0 if none."""
    stripped = text.lstrip(" \t\n\r\f\v")
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    if not digits:
        return 0
    return _to_int32(sign * int("".join(digits)))


@dataclass(frozen=True)
class Int:
    """A 64-bit signed integer value."""

    integer: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "integer", _to_int64(int(self.integer)))

    @classmethod
    def from_unsigned_long(cls, value: int) -> "Int":
        return cls(_to_int64(int(value) & _INT64_MASK))

    @classmethod
    def from_double(cls, value: float) -> "Int":
        """Truncate ``value`` toward zero."""
        return cls(int(value))

    @classmethod
    def from_cstring(cls, text: Optional[str]) -> "Int":
        return cls(_atoi(text) if text is not None else 0)

    def as_long_long(self) -> int:
        return self.integer

    def as_double(self) -> float:
        return float(self.integer)

    def as_bool(self) -> bool:
        return self.integer != 0


@dataclass(frozen=True)
class Double:
    """A double-precision floating-point value."""

    floating_point: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "floating_point", float(self.floating_point))

    @classmethod
    def from_long_long(cls, value: int) -> "Double":
        return cls(float(_to_int64(int(value))))

    def as_long_long(self) -> int:
        """Return the floor of the value."""
        return _to_int64(math.floor(self.floating_point))

    def as_double(self) -> float:
        return self.floating_point

    def as_bool(self) -> bool:
        return self.floating_point != 0.0