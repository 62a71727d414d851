"""
Collection - ordered container with the full functional operation set.

Every derived-result operation (filter, map, reverse, clone, non-self
sort, remove_repeat_items) returns a new Collection and leaves the
source as it was.
"""

from __future__ import annotations

from typing import TypeVar

from .list import List
from .operations import SequenceOperations

T = TypeVar("T")


class Collection(SequenceOperations, List[T]):
    """
    List plus filtering, searching, sorting, mapping and deduplication.

        c = Collection.create([2, 1, 3])
        c.insert_sort(lambda a, b: a < b).to_array()   # [1, 2, 3]
        c.to_array()                                   # [2, 1, 3]
    """
    pass
