from collections import OrderedDict
from typing import Any, Callable, Hashable, Iterable, Iterator, Optional

from sortedcontainers import SortedKeyList


__author__ = 'Beamparse Developers'
__all__ = [
    'BoundedCache',
    'BoundedHeap',
]


class BoundedCache:
    """A mapping holding at most a fixed number of entries, evicting the least recently used."""

    def __init__(self, size: int):
        if size <= 0:
            raise ValueError("Cache size must be positive.")
        self._size = size
        self._entries = OrderedDict()

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key: Hashable):
        return key in self._entries

    @property
    def size(self) -> int:
        return self._size

    def get(self, key: Hashable, default: Any = None) -> Any:
        try:
            value = self._entries[key]
        except KeyError:
            return default
        self._entries.move_to_end(key)
        return value

    def put(self, key: Hashable, value: Any) -> None:
        self._entries[key] = value
        self._entries.move_to_end(key)
        while len(self._entries) > self._size:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()


class BoundedHeap:
    """
    A collection that keeps only the best items added to it.

    Items are ranked by the key function, smallest key first. Once the heap is full, adding an
    item drops the worst one. Items with equal keys keep the order they were added in.
    """

    def __init__(self, capacity: Optional[int], key: Callable[[Any], Any], values: Iterable = None):
        if capacity is not None and capacity <= 0:
            raise ValueError("Capacity must be positive.")
        self._capacity = capacity
        self._items = SortedKeyList(key=key)
        if values is not None:
            for value in values:
                self.add(value)

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __iter__(self) -> Iterator:
        # Best first
        return iter(self._items)

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def add(self, value: Any) -> None:
        self._items.add(value)
        if self._capacity is not None and len(self._items) > self._capacity:
            self._items.pop()

    def first(self) -> Any:
        """Return the best item."""
        return self._items[0]

    def last(self) -> Any:
        """Return the worst item."""
        return self._items[-1]

    def extract(self) -> Any:
        """Remove and return the best item."""
        return self._items.pop(0)

    def clear(self) -> None:
        self._items.clear()
