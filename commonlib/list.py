"""
List - the base ordered container.

Owns a contiguous, insertion-ordered Python list of children and exposes
the primitive lookup and mutation operations every sequence container
builds on. Elements are referenced, never copied.

Lookups are total: an index outside 0..count-1 yields None instead of
raising.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable, Final, Generic, Iterator, Optional, TypeVar

from ._logging import null_logger
from .control import Control

T = TypeVar("T")

logger: Final = null_logger(__name__)

# Iterables added as one element rather than unpacked
_ATOMIC_TYPES = (str, bytes, bytearray, dict)

# Default for optional arguments where None is a meaningful value
MISSING: Final = object()


def call_with_source(
    func: Callable,
    value: Any,
    position: Any,
    source: Any,
    with_source: bool,
) -> Any:
    """Invoke an iteration callback, appending ``source`` when requested."""
    if with_source:
        return func(value, position, source)
    return func(value, position)


class List(Generic[T]):
    """
    Ordered container of children.

    Mutators return the container itself so calls can be chained:

        List.create().add_child(1).add_child(2).get_count()  # 2
    """

    def __init__(self, children: Optional[Iterable[T]] = None):
        self._children: list[T] = []
        if children is not None:
            self.add_children(children)

    @classmethod
    def create(cls, children: Optional[Iterable[T]] = None):
        return cls(children)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_count(self) -> int:
        return len(self._children)

    def get_children(self) -> list[T]:
        """Return the backing list itself (not a copy)."""
        return self._children

    def get_child(self, index: int) -> Optional[T]:
        """Return the element at ``index``, or None when out of range."""
        if not isinstance(index, int) or isinstance(index, bool):
            return None
        if index < 0 or index >= len(self._children):
            return None
        return self._children[index]

    def has_child(self, value: Any) -> bool:
        return value in self._children

    def has_child_with_func(
        self,
        func: Callable[..., Any],
        with_source: bool = False,
    ) -> bool:
        """True if ``func(value, index)`` is truthy for some element."""
        for index, value in enumerate(self._children):
            if call_with_source(func, value, index, self._children, with_source):
                return True
        return False

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_child(self, value: T) -> List[T]:
        self._children.append(value)
        return self

    def add_children(self, source: Any) -> List[T]:
        """
        Append every element of ``source`` in order.

        ``source`` may be another List, a list/tuple or any other iterable.
        Strings, bytes and dicts, like any non-iterable value, are added as
        a single element.
        """
        if isinstance(source, List):
            self._children.extend(source.get_children())
        elif isinstance(source, Iterable) and not isinstance(source, _ATOMIC_TYPES):
            self._children.extend(source)
        else:
            self._children.append(source)
        return self

    def set_children(self, children: Iterable[T]) -> List[T]:
        """Replace the backing list wholesale."""
        self._children = children if isinstance(children, list) else list(children)
        return self

    def unshift_child(self, value: T) -> List[T]:
        self._children.insert(0, value)
        return self

    def remove_all_children(self) -> List[T]:
        logger.debug("Removing all %d children from %s", len(self._children), type(self).__name__)
        self._children = []
        return self

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def for_each(
        self,
        func: Callable[..., Any],
        context: Any = MISSING,
    ) -> List[T]:
        """
        Call ``func(value, index)`` for each element in order.

        Returning Control.BREAK stops the traversal. When ``context`` is
        given it is passed through as a third argument.
        """
        for index, value in enumerate(self._copy_children()):
            if context is MISSING:
                result = func(value, index)
            else:
                result = func(value, index, context)
            if result is Control.BREAK:
                break
        return self

    def to_array(self) -> list[T]:
        return self._copy_children()

    # -------------------------------------------------------------------------
    # Protected helpers
    # -------------------------------------------------------------------------

    def _copy_children(self) -> list[T]:
        return list(self._children)

    def _remove_child_helper(self, matcher: Any) -> tuple[list[T], list[T]]:
        """
        Partition the children against ``matcher``.

        A callable matcher is treated as a predicate ``matcher(value, index)``;
        anything else is compared by equality. Every match counts, not just
        the first.

        Returns:
            (kept, removed), both in original order
        """
        kept: list[T] = []
        removed: list[T] = []

        for index, value in enumerate(self._children):
            if callable(matcher):
                matched = matcher(value, index)
            else:
                matched = value == matcher
            (removed if matched else kept).append(value)

        return kept, removed

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[T]:
        return iter(self._copy_children())

    def __contains__(self, value: Any) -> bool:
        return self.has_child(value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._children == other._children

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._children!r})"
