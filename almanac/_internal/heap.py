"""Binary heap keyed by an orderable value.

This module is not part of the public API.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, TypeVar

E = TypeVar("E")


class Heap(Generic[E]):
    """An array-backed binary heap of elements with integer keys.

    The heap is a min-heap by default; with ``reverse=True`` the element
    with the largest key sits at the root. Elements themselves are never
    compared: entries with equal keys are ordered by insertion.

    Elements are loaded in bulk with append() followed by a single
    heapify(), then consumed with peek(), replace_root() and
    remove_root(). replace_root() is a pop followed by a push in one
    sift-down pass, which is how a cursor is re-keyed after it advances.

    Examples:
        >>> heap = Heap(reverse=True)
        >>> heap.append("a", 1)
        >>> heap.append("b", 3)
        >>> heap.heapify()
        >>> heap.peek()
        'b'
    """

    __slots__ = ("_entries", "_sign", "_counter")

    def __init__(self, reverse: bool = False) -> None:
        self._entries: list[tuple[int, int, E]] = []
        self._sign = -1 if reverse else 1
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def append(self, element: E, key: int) -> None:
        """Add an element without restoring the heap property.

        Call heapify() once all elements have been appended.
        """
        self._entries.append((key * self._sign, next(self._counter), element))

    def heapify(self) -> None:
        """Restore the heap property over all appended elements in O(n)."""
        heapq.heapify(self._entries)

    def peek(self) -> E:
        """Return the root element without removing it.

        Raises:
            IndexError: If the heap is empty.
        """
        return self._entries[0][2]

    def replace_root(self, element: E, key: int) -> None:
        """Replace the root element and sift the new entry down.

        Raises:
            IndexError: If the heap is empty.
        """
        heapq.heapreplace(
            self._entries, (key * self._sign, next(self._counter), element)
        )

    def remove_root(self) -> E:
        """Remove and return the root element.

        Raises:
            IndexError: If the heap is empty.
        """
        return heapq.heappop(self._entries)[2]


__all__ = ["Heap"]
