"""Queue - FIFO view over a List: push at the rear, pop from the front."""

from __future__ import annotations

from typing import Optional, TypeVar

from .list import List

T = TypeVar("T")


class Queue(List[T]):

    @property
    def front(self) -> Optional[T]:
        return self.get_child(0)

    @property
    def rear(self) -> Optional[T]:
        if not self._children:
            return None
        return self._children[-1]

    def push(self, element: T) -> None:
        self._children.append(element)

    def pop(self) -> Optional[T]:
        """Remove and return the front element, or None when empty."""
        if not self._children:
            return None
        return self._children.pop(0)

    def clear(self) -> None:
        self.remove_all_children()
