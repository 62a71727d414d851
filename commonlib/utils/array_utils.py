"""Helpers over plain Python lists."""

from __future__ import annotations

from typing import Any, Callable, Optional


def _default_equal(a: Any, b: Any) -> bool:
    return a == b


def remove_repeat_items(
    items: list,
    is_equal: Optional[Callable[[Any, Any], bool]] = None,
) -> list:
    """
    Return a new list without repeated items, keeping first occurrences.

    Items are compared pairwise with ``is_equal`` (``==`` by default), so
    unhashable items are supported.
    """
    if is_equal is None:
        is_equal = _default_equal

    result: list = []
    for item in items:
        if not any(is_equal(kept, item) for kept in result):
            result.append(item)
    return result


def contain(items: list, element: Any) -> bool:
    """
    Membership test.

    A callable ``element`` is used as a predicate over the items.
    """
    if callable(element):
        return any(element(item) for item in items)
    return any(item == element for item in items)
