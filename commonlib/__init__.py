# commonlib
# Generic containers with functional operations

"""
Ordered lists, string-keyed hashes, stacks and queues.

    List        - base ordered container
    Collection  - List + filter/find_one/map/sort/insert_sort/dedupe/clone
    Stack       - LIFO List with the Collection operation set
    Queue       - FIFO List
    Hash        - string-keyed analogue of Collection

Callbacks steer traversal by returning Control.REMOVE (omit from a map
result) or Control.BREAK (stop a for_each).
"""

from .collection import Collection
from .control import BREAK, CONTINUE, REMOVE, Control
from .hash import Hash
from .list import List
from .log import Log, PreconditionError
from .queue import Queue
from .stack import Stack

__all__ = [
    "BREAK",
    "CONTINUE",
    "Collection",
    "Control",
    "Hash",
    "List",
    "Log",
    "PreconditionError",
    "Queue",
    "REMOVE",
    "Stack",
]
