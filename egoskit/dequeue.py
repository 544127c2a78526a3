"""A queue that takes items at both ends and hands them out from the front."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from typing import Any


class QueueError(Exception):
    """Raised when a queue operation gets bad input or cannot be carried out."""


class Queue:
    """Queue of arbitrary non-``None`` items.

    Items are added at the head (``prepend``) or the tail (``append``) and
    removed from the head (``dequeue``).  ``delete`` removes the first entry
    that is the very object given, not merely an equal one.
    """

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def prepend(self, item: Any) -> None:
        """Put ``item`` at the head of the queue."""
        if item is None:
            raise QueueError("cannot prepend None")
        self._items.appendleft(item)

    def append(self, item: Any) -> None:
        """Put ``item`` at the tail of the queue."""
        if item is None:
            raise QueueError("cannot append None")
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the item at the head of the queue."""
        if not self._items:
            raise QueueError("dequeue from an empty queue")
        return self._items.popleft()

    def iterate(self, func: Callable[[Any, Any], object], arg: Any = None) -> None:
        """Call ``func(item, arg)`` for every item, head to tail."""
        if func is None:
            raise QueueError("no function given to iterate")
        for item in list(self._items):
            func(item, arg)

    def delete(self, item: Any) -> None:
        """Remove the first occurrence of ``item`` (by identity)."""
        if item is None:
            raise QueueError("cannot delete None")
        if not self._items:
            raise QueueError("delete from an empty queue")
        for index, current in enumerate(self._items):
            if current is item:
                del self._items[index]
                return
        raise QueueError("item is not in the queue")

    def free(self) -> None:
        """Release the queue; only an empty queue may be released."""
        if self._items:
            raise QueueError(f"cannot free a queue holding {len(self._items)} items")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __reversed__(self) -> Iterator[Any]:
        return reversed(list(self._items))