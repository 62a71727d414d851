"""
Functional operations over ordered sequences.

The algorithms live here once, as plain functions over Python lists, and
are attached to the sequence containers through SequenceOperations:

    filter_items        - elements where predicate(value, index) holds
    find_first          - first such element, or None
    map_items           - transform(value, index), dropping Control.REMOVE
    sort_items          - three-way comparator sort (copy)
    insertion_sort      - stable sort on a strict "a before b" predicate
    dedupe / has_duplicates
    clone_items         - shallow copy, or deep via each element's clone()

None of the functions mutate their input list.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Callable, Final, Optional

from ._logging import null_logger
from .control import Control
from .list import call_with_source
from .utils.array_utils import remove_repeat_items

if TYPE_CHECKING:
    from .collection import Collection

logger: Final = null_logger(__name__)


# =============================================================================
# FREE FUNCTIONS
# =============================================================================

def clone_element(value: Any) -> Any:
    """Return ``value.clone()`` when the element can clone itself, else ``value``."""
    clone = getattr(value, "clone", None)
    if callable(clone):
        return clone()
    return value


def clone_items(items: list, deep: bool = False) -> list:
    """
    Copy a sequence.

    Shallow copies share every element with the source. Deep copies replace
    each element exposing a ``clone()`` method with its clone; primitives and
    clone-less objects are still shared.
    """
    if not deep:
        return list(items)
    return [clone_element(value) for value in items]


def filter_items(
    items: list,
    predicate: Callable[..., Any],
    with_source: bool = False,
) -> list:
    return [
        value
        for index, value in enumerate(list(items))
        if call_with_source(predicate, value, index, items, with_source)
    ]


def find_first(
    items: list,
    predicate: Callable[..., Any],
    with_source: bool = False,
) -> Any:
    for index, value in enumerate(list(items)):
        if call_with_source(predicate, value, index, items, with_source):
            return value
    return None


def map_items(
    items: list,
    transform: Callable[..., Any],
    with_source: bool = False,
) -> list:
    result = []
    for index, value in enumerate(list(items)):
        mapped = call_with_source(transform, value, index, items, with_source)
        if mapped is Control.REMOVE:
            continue
        result.append(mapped)
    return result


def sort_items(items: list, comparator: Callable[[Any, Any], Any]) -> list:
    """Sort a copy of ``items`` with a negative/zero/positive comparator."""
    return sorted(items, key=cmp_to_key(comparator))


def insertion_sort(items: list, less_than: Callable[[Any, Any], Any]) -> list:
    """
    Stable insertion sort of a copy of ``items``.

    An element only moves left past strictly greater neighbours, so
    elements that compare equal keep their original relative order.
    """
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and less_than(current, result[j]):
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def dedupe(items: list, is_equal: Optional[Callable[[Any, Any], bool]] = None) -> list:
    return remove_repeat_items(items, is_equal)


def has_duplicates(
    items: list,
    is_equal: Optional[Callable[[Any, Any], bool]] = None,
) -> bool:
    return len(dedupe(items, is_equal)) != len(items)


def _collection(children: list) -> Collection:
    # collection.py imports this module
    from .collection import Collection
    return Collection(children)


# =============================================================================
# MIXIN
# =============================================================================

class SequenceOperations:
    """
    Functional operation set for List-based containers.

    Derived results are always new Collections; the source is only changed
    by ``remove_child`` and by sorts called with ``sort_self=True``. Clones
    keep the concrete type of the source container.
    """

    # -------------------------------------------------------------------------
    # Cloning
    # -------------------------------------------------------------------------

    def clone_shallow(self):
        return type(self)(clone_items(self._children))

    def clone_deep(self):
        return type(self)(clone_items(self._children, deep=True))

    def clone_into(self, target, deep: bool = False):
        """Replace ``target``'s children with a copy of this container's."""
        target.set_children(clone_items(self._children, deep=deep))
        return target

    def clone(self, target=None, deep: bool = False):
        """
        Dispatch to the named clone operations.

            clone()                     -> clone_shallow()
            clone(deep=True)            -> clone_deep()
            clone(target)               -> clone_into(target)
            clone(target, deep=True)    -> clone_into(target, deep=True)

        A bool in the first position is read as ``deep``, so
        ``clone(True)`` is a deep clone.
        """
        if isinstance(target, bool):
            target, deep = None, target
        if target is not None:
            return self.clone_into(target, deep)
        return self.clone_deep() if deep else self.clone_shallow()

    # -------------------------------------------------------------------------
    # Derived results
    # -------------------------------------------------------------------------

    def filter(self, predicate: Callable[..., Any], with_source: bool = False) -> Collection:
        return _collection(filter_items(self._children, predicate, with_source))

    def find_one(self, predicate: Callable[..., Any], with_source: bool = False) -> Any:
        return find_first(self._children, predicate, with_source)

    def reverse(self) -> Collection:
        return _collection(self._copy_children()[::-1])

    def map(self, transform: Callable[..., Any], with_source: bool = False) -> Collection:
        return _collection(map_items(self._children, transform, with_source))

    def remove_repeat_items(
        self,
        is_equal: Optional[Callable[[Any, Any], bool]] = None,
    ) -> Collection:
        return _collection(dedupe(self._children, is_equal))

    def has_repeat_items(
        self,
        is_equal: Optional[Callable[[Any, Any], bool]] = None,
    ) -> bool:
        return has_duplicates(self._children, is_equal)

    # -------------------------------------------------------------------------
    # Sorting
    # -------------------------------------------------------------------------

    def sort(self, comparator: Callable[[Any, Any], Any], sort_self: bool = False):
        """
        Sort with a three-way comparator.

        Returns the container itself when ``sort_self`` is set, otherwise a
        new sorted Collection with the source left untouched.
        """
        ordered = sort_items(self._children, comparator)
        if sort_self:
            logger.debug("Sorting %s in place", type(self).__name__)
            self._children[:] = ordered
            return self
        return _collection(ordered)

    def insert_sort(self, less_than: Callable[[Any, Any], Any], sort_self: bool = False):
        """Stable counterpart of ``sort`` taking a strict less-than predicate."""
        ordered = insertion_sort(self._children, less_than)
        if sort_self:
            logger.debug("Insertion-sorting %s in place", type(self).__name__)
            self._children[:] = ordered
            return self
        return _collection(ordered)

    # -------------------------------------------------------------------------
    # In-place removal
    # -------------------------------------------------------------------------

    def remove_child(self, matcher: Any) -> Collection:
        """
        Remove every element matching ``matcher`` from this container.

        ``matcher`` is either a value (compared with ==) or a predicate
        ``matcher(value, index)``. Always returns a Collection of the removed
        elements, even when exactly one matched.
        """
        kept, removed = self._remove_child_helper(matcher)
        self._children[:] = kept
        logger.debug("Removed %d children from %s", len(removed), type(self).__name__)
        return _collection(removed)
