"""Function helpers."""

from __future__ import annotations

from typing import Any, Callable


def bind(obj: Any, func: Callable[..., Any]) -> Callable[..., Any]:
    """Return a callable that invokes ``func(obj, *args, **kwargs)``."""
    def bound(*args: Any, **kwargs: Any) -> Any:
        return func(obj, *args, **kwargs)
    return bound
