"""A list whose operations are serialised by a lock."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator
from typing import Any

__all__ = ["ThreadSafeList"]


class ThreadSafeList:
    """An ordered collection safe to share between threads.

    Indices are non-negative positions; an index outside the list raises
    :class:`IndexError`.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._lock = threading.RLock()
        self._items: list[Any] = list(items)

    def __repr__(self) -> str:
        with self._lock:
            return f"{type(self).__name__}({self._items!r})"

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        with self._lock:
            snapshot = list(self._items)
        return iter(snapshot)

    def _check_index(self, index: int, upper: int) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"index must be an int, got {type(index).__name__}")
        if not 0 <= index < upper:
            raise IndexError(f"index {index} out of range")

    def __getitem__(self, index: int) -> Any:
        with self._lock:
            self._check_index(index, len(self._items))
            return self._items[index]

    def __delitem__(self, index: int) -> None:
        with self._lock:
            self._check_index(index, len(self._items))
            del self._items[index]

    def insert(self, index: int, data: Any) -> None:
        """Insert ``data`` so that it ends up at position ``index``."""
        with self._lock:
            self._check_index(index, len(self._items) + 1)
            self._items.insert(index, data)

    def iterate(self, callback: Callable[[Any, int], None]) -> None:
        """Call ``callback(item, index)`` for every item, holding the lock."""
        with self._lock:
            for index, item in enumerate(self._items):
                callback(item, index)

    def remove_first(self, predicate: Callable[[Any], bool]) -> bool:
        """Remove the first item matching ``predicate``; report whether one did."""
        with self._lock:
            for index, item in enumerate(self._items):
                if predicate(item):
                    del self._items[index]
                    return True
            return False

    def any_match(self, predicate: Callable[[Any], bool]) -> bool:
        """Return whether any item matches ``predicate``."""
        with self._lock:
            return any(predicate(item) for item in self._items)

    def transform(self, function: Callable[[Any], Any]) -> None:
        """Replace every item with ``function(item)``."""
        with self._lock:
            self._items = [function(item) for item in self._items]

    def clear(self) -> None:
        """Remove every item."""
        with self._lock:
            self._items.clear()