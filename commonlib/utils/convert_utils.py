"""String conversion helpers."""

from __future__ import annotations

import json
from typing import Any

from .judge_utils import is_function, is_number


def to_string(obj: Any) -> str:
    """
    Render ``obj`` as a readable string.

    Strings pass through, numbers use ``str``, callables their qualified
    name, dicts/lists/tuples JSON (``repr`` when not JSON-serialisable).
    """
    if isinstance(obj, str):
        return obj
    if is_number(obj):
        return str(obj)
    if is_function(obj):
        return getattr(obj, "__qualname__", None) or repr(obj)
    if isinstance(obj, (dict, list, tuple)):
        try:
            return json.dumps(obj)
        except (TypeError, ValueError):
            return repr(obj)
    return str(obj)
