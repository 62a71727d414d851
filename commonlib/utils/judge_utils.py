"""
Type-judging predicates.

Pure boolean classifiers. The ``*_exactly`` variants reject subclasses.
``bool`` is never a number here even though it subclasses ``int``.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from typing import Any


def is_array(obj: Any) -> bool:
    return isinstance(obj, (list, tuple))


def is_array_exactly(obj: Any) -> bool:
    return type(obj) is list


def is_number(obj: Any) -> bool:
    return isinstance(obj, numbers.Number) and not isinstance(obj, bool)


def is_number_exactly(obj: Any) -> bool:
    return type(obj) in (int, float)


def is_string(obj: Any) -> bool:
    return isinstance(obj, str)


def is_string_exactly(obj: Any) -> bool:
    return type(obj) is str


def is_boolean(obj: Any) -> bool:
    return isinstance(obj, bool)


def is_object(obj: Any) -> bool:
    """True for mappings and instances of user-defined classes."""
    if obj is None or isinstance(obj, (str, bytes, bool, numbers.Number, list, tuple)):
        return False
    if callable(obj):
        return False
    return isinstance(obj, Mapping) or hasattr(obj, "__dict__")


def is_direct_object(obj: Any) -> bool:
    """True only for plain dicts."""
    return type(obj) is dict


def is_function(obj: Any) -> bool:
    return callable(obj) and not isinstance(obj, type)


def is_host_method(obj: Any, prop: str) -> bool:
    """True if ``obj`` carries a callable attribute named ``prop``."""
    return callable(getattr(obj, prop, None))


def is_dom(obj: Any) -> bool:
    """Always False; there are no DOM nodes outside a browser."""
    return False


def is_node_js() -> bool:
    """Always False; this is not a JavaScript host."""
    return False
