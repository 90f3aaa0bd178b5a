"""Mutable ordered collection of objects, compared by identity."""

from __future__ import annotations

from typing import Any

from bwkit import log
from bwkit.arrays import Array


class MutableArray(Array):
    """An :class:`Array` that can grow and shrink."""

    def append(self, obj: Any) -> None:
        """Add ``obj`` at the end; None is a fatal error."""
        if obj is None:
            log.error_null_parameter("MutableArray.append")
        self._items.append(obj)

    def insert(self, obj: Any, index: int) -> None:
        """Insert ``obj`` before ``index``; past the end appends, negative means 0."""
        if obj is None:
            log.error_null_parameter("MutableArray.insert")
        if index >= len(self._items):
            self.append(obj)
            return
        self._items.insert(max(index, 0), obj)

    def remove(self, obj: Any) -> Any:
        """Remove ``obj`` (by identity) and return it, or None if it is absent."""
        if obj is None or not self._items:
            return None
        for position, item in enumerate(self._items):
            if item is obj:
                return self.remove_at(position)
        log.warning("MutableArray.remove", "OBJECT NOT IN ARRAY")
        return None

    def remove_at(self, index: int) -> Any:
        """Remove and return the item at ``index``, or None when out of range."""
        if index < 0 or index >= len(self._items):
            return None
        return self._items.pop(index)

    def remove_first(self) -> Any:
        return self.remove_at(0) if self._items else None

    def remove_last(self) -> Any:
        return self.remove_at(len(self._items) - 1) if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def describe(self) -> str:
        return f"MutableArray({len(self._items)})"