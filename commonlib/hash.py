"""
Hash - string-keyed container.

Key/value analogue of Collection, backed by a dict. Iteration order is the
insertion order of the keys currently present; re-setting an existing key
keeps its position.

Callbacks receive ``(value, key)``. Projections to a sequence (keys,
values, removed values, flattened values) are Collections.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any, Callable, Final, Generic, Iterator, Optional, TypeVar

from ._logging import null_logger
from .collection import Collection
from .control import Control
from .list import MISSING, call_with_source
from .log import Log
from .operations import clone_element

T = TypeVar("T")

logger: Final = null_logger(__name__)


class Hash(Generic[T]):
    """
    Mapping from string key to value.

        h = Hash.create({"a1": 1, "a2": 2})
        h.map(lambda v, k: REMOVE if v == 2 else (k, v * 2)).get_children()
        # {"a1": 2}
    """

    def __init__(self, children: Optional[Mapping[str, T]] = None):
        self._children: dict[str, T] = {}
        if children is not None:
            self.add_children(children)

    @classmethod
    def create(cls, children: Optional[Mapping[str, T]] = None) -> Hash[T]:
        return cls(children)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_children(self) -> dict[str, T]:
        """Return the backing dict itself (not a copy)."""
        return self._children

    def get_count(self) -> int:
        return len(self._children)

    def get_keys(self) -> Collection[str]:
        return Collection(list(self._children.keys()))

    def get_values(self) -> Collection[T]:
        return Collection(list(self._children.values()))

    def get_child(self, key: str) -> Optional[T]:
        return self._children.get(key)

    def has_child(self, key: str) -> bool:
        """True if ``key`` is present, whatever (even falsy) value it holds."""
        return key in self._children

    def has_child_with_func(
        self,
        func: Callable[..., Any],
        with_source: bool = False,
    ) -> bool:
        for key, value in list(self._children.items()):
            if call_with_source(func, value, key, self._children, with_source):
                return True
        return False

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def set_value(self, key: str, value: Any) -> Hash[T]:
        self._children[key] = value
        return self

    def add_child(self, key: str, value: Any) -> Hash[T]:
        self._children[key] = value
        return self

    def add_children(self, source: Mapping[str, T] | Hash[T]) -> Hash[T]:
        """Merge every pair of ``source``; its keys win on conflict."""
        if isinstance(source, Hash):
            self._children.update(source.get_children())
        elif isinstance(source, Mapping):
            self._children.update(source)
        else:
            Log.error(True, Log.info.func_must_be("source", "a mapping or Hash"))
        return self

    def append_child(self, key: str, value: Any) -> Hash[T]:
        """
        Append ``value`` to the Collection stored under ``key``.

        A missing key gets a new Collection holding ``value``.

        Raises:
            PreconditionError: if ``key`` holds something other than a Collection
        """
        if key not in self._children:
            self._children[key] = Collection([value])
            return self

        existing = self._children[key]
        Log.error(
            not isinstance(existing, Collection),
            Log.info.func_must_be(f"value under key '{key}'", "Collection"),
        )
        existing.add_child(value)
        return self

    def set_children(self, children: Mapping[str, T]) -> Hash[T]:
        self._children = dict(children)
        return self

    def remove_child(self, matcher: Any) -> Collection[T]:
        """
        Remove entries by key or by predicate ``matcher(value, key)``.

        An unhashable key matches nothing.

        Returns:
            Collection of the removed values, in key order
        """
        removed = []

        if callable(matcher):
            for key, value in list(self._children.items()):
                if matcher(value, key):
                    removed.append(value)
                    del self._children[key]
        elif isinstance(matcher, Hashable) and matcher in self._children:
            removed.append(self._children.pop(matcher))

        logger.debug("Removed %d entries from Hash", len(removed))
        return Collection(removed)

    def remove_all_children(self) -> Hash[T]:
        logger.debug("Removing all %d entries from Hash", len(self._children))
        self._children = {}
        return self

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def for_each(self, func: Callable[..., Any], context: Any = MISSING) -> Hash[T]:
        """
        Call ``func(value, key)`` for each entry; Control.BREAK stops.

        When ``context`` is given it is passed through as a third argument.
        """
        for key, value in list(self._children.items()):
            if context is MISSING:
                result = func(value, key)
            else:
                result = func(value, key, context)
            if result is Control.BREAK:
                break
        return self

    def filter(self, func: Callable[..., Any], with_source: bool = False) -> Hash[T]:
        result = {
            key: value
            for key, value in list(self._children.items())
            if call_with_source(func, value, key, self._children, with_source)
        }
        return Hash(result)

    def find_one(
        self,
        func: Callable[..., Any],
        with_source: bool = False,
    ) -> Optional[tuple[str, T]]:
        """Return the first matching ``(key, value)`` pair, or None."""
        for key, value in list(self._children.items()):
            if call_with_source(func, value, key, self._children, with_source):
                return key, value
        return None

    def map(self, func: Callable[..., Any], with_source: bool = False) -> Hash:
        """
        Build a new Hash from ``func(value, key)``.

        The callback returns a ``(key, value)`` pair to keep, or
        Control.REMOVE to drop the entry.

        Raises:
            PreconditionError: if the callback returns anything else
        """
        result = {}
        for key, value in list(self._children.items()):
            mapped = call_with_source(func, value, key, self._children, with_source)
            if mapped is Control.REMOVE:
                continue

            Log.error(
                not isinstance(mapped, (tuple, list)) or len(mapped) != 2,
                Log.info.func_must_be("map callback result", "a [key, value] pair or REMOVE"),
            )
            result[mapped[0]] = mapped[1]

        return Hash(result)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_collection(self) -> Collection:
        """
        Flatten the values into one Collection.

        Collection values contribute their elements; other values are added
        as they are.

        Raises:
            PreconditionError: if any value is itself a Hash
        """
        result = Collection()

        for value in self._children.values():
            Log.error(
                isinstance(value, Hash),
                Log.info.func_can_not("Hash value", "be flattened into a Collection"),
            )
            if isinstance(value, Collection):
                result.add_children(value)
            else:
                result.add_child(value)

        return result

    def to_array(self) -> list[T]:
        return list(self._children.values())

    # -------------------------------------------------------------------------
    # Cloning
    # -------------------------------------------------------------------------

    def _clone_children(self, deep: bool) -> dict[str, T]:
        if not deep:
            return dict(self._children)
        return {key: clone_element(value) for key, value in self._children.items()}

    def clone_shallow(self) -> Hash[T]:
        return type(self)(self._clone_children(deep=False))

    def clone_deep(self) -> Hash[T]:
        return type(self)(self._clone_children(deep=True))

    def clone_into(self, target: Hash, deep: bool = False) -> Hash:
        target.set_children(self._clone_children(deep))
        return target

    def clone(self, target: Optional[Hash] = None, deep: bool = False) -> Hash:
        """Dispatch like Collection.clone; a bool first argument means ``deep``."""
        if isinstance(target, bool):
            target, deep = None, target
        if target is not None:
            return self.clone_into(target, deep)
        return self.clone_deep() if deep else self.clone_shallow()

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._children))

    def __contains__(self, key: object) -> bool:
        return key in self._children

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._children == other._children

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Hash({self._children!r})"
