"""
Merge and copy helpers for dicts, lists and plain objects.

    extend             - shallow merge, source wins
    extend_deep        - recursive copy of nested dicts/lists
    copy_public_attri  - deep copy of public, non-callable entries
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from .judge_utils import is_function


def _entries(source: Any) -> list[tuple[Any, Any]]:
    if isinstance(source, dict):
        return list(source.items())
    return list(vars(source).items())


def extend(destination: Any, source: Any) -> Any:
    """
    Copy every entry of ``source`` onto ``destination`` and return it.

    Dicts are merged by key; other objects by attribute.
    """
    for key, value in _entries(source):
        if isinstance(destination, dict):
            destination[key] = value
        else:
            setattr(destination, key, value)
    return destination


def _accept_all(value: Any, key: Any) -> bool:
    return True


def _copy_member(member: Any) -> Any:
    clone = getattr(member, "clone", None)
    if callable(clone):
        return clone()
    if isinstance(member, (dict, list)):
        return extend_deep(member)
    return member


def extend_deep(
    parent: Any,
    child: Any = None,
    filter: Optional[Callable[[Any, Any], bool]] = None,
) -> Any:
    """
    Recursively copy ``parent`` into ``child``.

    Lists and dicts are walked; ``filter(value, key_or_index)`` decides
    which entries are copied. Members with a ``clone()`` method are cloned,
    nested lists/dicts are copied recursively, anything else is shared.
    A ``parent`` that is neither a list nor a dict is returned unchanged.
    """
    if filter is None:
        filter = _accept_all

    if isinstance(parent, list):
        child = [] if child is None else child
        for index, member in enumerate(parent):
            if filter(member, index):
                child.append(_copy_member(member))
        return child

    if isinstance(parent, dict):
        child = {} if child is None else child
        for key, member in parent.items():
            if filter(member, key):
                child[key] = _copy_member(member)
        return child

    return parent


def _is_public(value: Any, key: Any) -> bool:
    return not str(key).startswith("_") and not is_function(value)


def copy_public_attri(source: Any) -> dict:
    """Deep-copy the public, non-callable entries of ``source`` into a new dict."""
    if not isinstance(source, dict):
        source = dict(_entries(source))
    return extend_deep(source, {}, _is_public)
