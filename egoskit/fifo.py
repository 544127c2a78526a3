"""Simple first-in first-out queue with push-back at the front."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class Fifo:
    """FIFO queue; ``insert`` puts an item back so that it comes out next."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def add(self, item: Any) -> None:
        """Add ``item`` at the back."""
        self._items.append(item)

    def insert(self, item: Any) -> None:
        """Add ``item`` at the front, making it the next one returned."""
        self._items.appendleft(item)

    def get(self) -> Any:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("get from an empty fifo")
        return self._items.popleft()

    def is_empty(self) -> bool:
        """Return whether the queue holds no items."""
        return not self._items

    def release(self) -> None:
        """Release the queue; it must be empty."""
        if self._items:
            raise RuntimeError(f"releasing a fifo that holds {len(self._items)} items")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))