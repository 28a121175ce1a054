"""dequekit - Bounded and linked deques, in-place reversal, and in-place comparison sorts."""

import logging

from dequekit.arraydeque import ArrayDeque
from dequekit.base import SimpleDeque
from dequekit.errors import (
    DequeEmptyError,
    DequeError,
    DequeFullError,
    InvalidCapacityError,
)
from dequekit.linkedlist import LinkedDeque
from dequekit.reversible import ReversibleDeque
from dequekit.sorting import (
    SORTS,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)
from dequekit.types import UNBOUNDED, Capacity, Comparable

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.0.1"

__all__ = [
    "SimpleDeque",
    "ArrayDeque",
    "LinkedDeque",
    "ReversibleDeque",
    "DequeError",
    "InvalidCapacityError",
    "DequeFullError",
    "DequeEmptyError",
    "selection_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "SORTS",
    "UNBOUNDED",
    "Capacity",
    "Comparable",
]
