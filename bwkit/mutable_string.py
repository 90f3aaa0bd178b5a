"""Growable character string with C-style length-returning mutators."""

from __future__ import annotations

from typing import Optional, Union


class MutableString:
    """A string that can be replaced, extended and truncated in place."""

    def __init__(self, text: Optional[str] = None) -> None:
        self._text = text if text else ""

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"MutableString({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MutableString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def character_at(self, index: int) -> Optional[str]:
        """Return the character at ``index``, or None when it is out of range."""
        if 0 <= index < len(self._text):
            return self._text[index]
        return None

    def set_text(self, text: Optional[str]) -> int:
        """Replace the contents with ``text``; return the new length."""
        self._text = text or ""
        return len(self._text)

    def set_string(self, other: Optional[Union["MutableString", str]]) -> int:
        """Replace the contents with those of ``other``; return the new length."""
        self._text = str(other) if other is not None else ""
        return len(self._text)

    def append_text(self, text: Optional[str]) -> int:
        """Append ``text``; return the new length."""
        if text:
            self._text += text
        return len(self._text)

    def append_string(self, other: Optional[Union["MutableString", str]]) -> int:
        """Append the contents of ``other``; return the new length."""
        if other is not None:
            self._text += str(other)
        return len(self._text)

    def append_character(self, ch: Union[str, int]) -> int:
        """Append one character (a str or a code point); a NUL is ignored."""
        if isinstance(ch, int):
            ch = chr(ch) if ch else ""
        if ch and ch != "\0":
            if len(ch) != 1:
                raise ValueError("append_character takes a single character")
            self._text += ch
        return len(self._text)

    def truncate_at(self, index: int) -> int:
        """Cut the string to ``index`` characters if it is longer; return the length."""
        if index < 0:
            raise IndexError("truncation index must not be negative")
        if index < len(self._text):
            self._text = self._text[:index]
        return len(self._text)