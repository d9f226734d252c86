"""A binary min-heap whose entries know their own position in the heap."""

from __future__ import annotations

from typing import Generic, Protocol, TypeVar

E = TypeVar("E")


class HeapInterface(Protocol[E]):
    """Ordering and position bookkeeping used by :class:`Heap`."""

    def less(self, a: E, b: E) -> bool: ...

    def greater(self, a: E, b: E) -> bool: ...

    def get_heap_position(self, h: E) -> int: ...

    def set_heap_position(self, h: E, pos: int) -> None: ...


class Heap(Generic[E]):
    """Min-heap that keeps each entry's position up to date via an interface.

    A position of -1 means the entry is not stored in the heap.
    """

    def __init__(self, interface: HeapInterface[E]) -> None:
        self._interface = interface
        self._entries: list[E] = []

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def empty(self) -> bool:
        """Whether the heap holds no entries."""
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def reserve(self, n: int) -> None:
        """Reserve room for ``n`` entries; lists grow on demand."""
        if n < 0:
            raise ValueError("cannot reserve a negative number of entries")

    def reset_heap_position(self, h: E) -> None:
        """Mark ``h`` as not stored."""
        self._interface.set_heap_position(h, -1)

    def is_stored(self, h: E) -> bool:
        """Whether ``h`` is in the heap."""
        return self._interface.get_heap_position(h) != -1

    def insert(self, h: E) -> None:
        """Insert ``h``."""
        self._entries.append(h)
        self._upheap(len(self._entries) - 1)

    def front(self) -> E:
        """The smallest entry."""
        if not self._entries:
            raise IndexError("front of an empty heap")
        return self._entries[0]

    def pop_front(self) -> None:
        """Remove the smallest entry."""
        if not self._entries:
            raise IndexError("pop from an empty heap")
        self._interface.set_heap_position(self._entries[0], -1)
        last = self._entries.pop()
        if self._entries:
            self._set(0, last)
            self._downheap(0)

    def _stored_position(self, h: E) -> int:
        pos = self._interface.get_heap_position(h)
        if pos == -1 or not 0 <= pos < len(self._entries):
            raise ValueError("entry is not stored in the heap")
        return pos

    def remove(self, h: E) -> None:
        """Remove ``h`` from the heap."""
        pos = self._stored_position(h)
        self._interface.set_heap_position(h, -1)
        last = self._entries.pop()
        if pos < len(self._entries):
            self._set(pos, last)
            self._downheap(pos)
            self._upheap(pos)

    def update(self, h: E) -> None:
        """Restore the heap order after the key of ``h`` changed."""
        pos = self._stored_position(h)
        self._downheap(pos)
        self._upheap(pos)

    def check(self) -> bool:
        """Whether the heap condition holds for every parent and child."""
        entries = self._entries
        greater = self._interface.greater
        size = len(entries)
        return not any(
            child < size and greater(entries[i], entries[child])
            for i in range(size)
            for child in (2 * i + 1, 2 * i + 2)
        )

    def _set(self, idx: int, h: E) -> None:
        self._entries[idx] = h
        self._interface.set_heap_position(h, idx)

    def _upheap(self, idx: int) -> None:
        h = self._entries[idx]
        while idx > 0:
            parent = (idx - 1) >> 1
            if not self._interface.less(h, self._entries[parent]):
                break
            self._set(idx, self._entries[parent])
            idx = parent
        self._set(idx, h)

    def _downheap(self, idx: int) -> None:
        h = self._entries[idx]
        size = len(self._entries)
        less = self._interface.less
        while True:
            child = 2 * idx + 1
            if child >= size:
                break
            if child + 1 < size and less(self._entries[child + 1], self._entries[child]):
                child += 1
            if less(h, self._entries[child]):
                break
            self._set(idx, self._entries[child])
            idx = child
        self._set(idx, h)