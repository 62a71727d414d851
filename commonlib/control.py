"""
Callback control values for container iteration.

Callbacks handed to ``map`` and ``for_each`` may return one of these
members to steer the traversal instead of producing a value:

    REMOVE   - ``map`` omits the current entry from its result
    BREAK    - ``for_each`` stops before visiting the next entry
    CONTINUE - explicit "keep going"; equivalent to returning anything else
"""

from __future__ import annotations

from enum import Enum


class Control(Enum):
    """Tagged outcome a callback can return to a container."""
    CONTINUE = "continue"
    REMOVE = "remove"
    BREAK = "break"

    @property
    def is_break(self) -> bool:
        return self is Control.BREAK


REMOVE = Control.REMOVE
BREAK = Control.BREAK
CONTINUE = Control.CONTINUE
