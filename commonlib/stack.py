"""Stack - LIFO view over a List, tail is the top."""

from __future__ import annotations

from typing import Optional, TypeVar

from .list import List
from .operations import SequenceOperations

T = TypeVar("T")


class Stack(SequenceOperations, List[T]):
    """
    LIFO container.

    Shares the Collection operation set; derived results are Collections,
    clones are Stacks.
    """

    @property
    def top(self) -> Optional[T]:
        if not self._children:
            return None
        return self._children[-1]

    def push(self, element: T) -> None:
        self._children.append(element)

    def pop(self) -> Optional[T]:
        """Remove and return the top element, or None when empty."""
        if not self._children:
            return None
        return self._children.pop()

    def clear(self) -> None:
        self.remove_all_children()
