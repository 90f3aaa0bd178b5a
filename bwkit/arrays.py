"""Immutable ordered collection of objects, compared by identity."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class Array:
    """An ordered collection whose membership test uses object identity."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: list[Any] = list(items) if items is not None else []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, obj: object) -> bool:
        if obj is None:
            return False
        return any(item is obj for item in self._items)

    def object_at(self, index: int) -> Any:
        """Return the item at ``index``, or None when it is out of range."""
        if index < 0 or index >= len(self._items):
            return None
        return self._items[index]

    def first(self) -> Any:
        return self._items[0] if self._items else None

    def last(self) -> Any:
        return self._items[-1] if self._items else None

    def describe(self) -> str:
        return f"{type(self).__name__}({len(self._items)})"

    def __repr__(self) -> str:
        return self.describe()