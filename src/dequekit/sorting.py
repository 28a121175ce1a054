"""
In-place comparison sorts.

Every sort takes a list and a ``reverse`` flag (False sorts ascending, True
descending), reorders the list in place and returns None. Elements only
need the rich comparison operators and must form a strict total order.
"""

import logging
from collections.abc import Callable, MutableSequence
from typing import Any, TypeAlias

from dequekit.types import C

logger = logging.getLogger(__name__)

SortFunction: TypeAlias = Callable[[MutableSequence[Any], bool], None]


def _precedes(a: C, b: C, reverse: bool) -> bool:
    """Return True if a belongs strictly before b in the requested order."""
    return a > b if reverse else a < b


def _precedes_or_ties(a: C, b: C, reverse: bool) -> bool:
    """Return True if a belongs before b or compares equal to it."""
    return a >= b if reverse else a <= b


def selection_sort(array: MutableSequence[C], reverse: bool = False) -> None:
    """
    Sort array in place by repeatedly selecting the extremum of the unsorted tail.

    Later elements equal to the current candidate replace it, so equal keys
    can be reordered. Not stable. O(n^2) comparisons in every case.
    """
    logger.debug("selection_sort n=%d reverse=%s", len(array), reverse)
    n = len(array)
    for current in range(n):
        extreme = current
        for candidate in range(current + 1, n):
            if _precedes_or_ties(array[candidate], array[extreme], reverse):
                extreme = candidate
        if extreme != current:
            array[current], array[extreme] = array[extreme], array[current]


def insertion_sort(array: MutableSequence[C], reverse: bool = False) -> None:
    """
    Sort array in place by inserting each element into the sorted prefix.

    Prefix elements that compare equal to the one being inserted are shifted
    past it as well, so runs of equal keys come out in reverse relative
    order. O(n) for input already sorted with distinct keys, O(n^2) worst case.
    """
    logger.debug("insertion_sort n=%d reverse=%s", len(array), reverse)
    for current in range(1, len(array)):
        key = array[current]
        position = current - 1
        # Shift out-of-order (and equal) elements one slot right
        while position >= 0 and _precedes_or_ties(key, array[position], reverse):
            array[position + 1] = array[position]
            position -= 1
        array[position + 1] = key


def merge_sort(array: MutableSequence[C], reverse: bool = False) -> None:
    """
    Sort array in place with top-down merge sort.

    Stable: on ties the element from the first half is placed first.
    O(n log n) time; each merge copies its two halves into temporary lists.
    """
    logger.debug("merge_sort n=%d reverse=%s", len(array), reverse)
    _merge_sort(array, 0, len(array) - 1, reverse)


def _merge_sort(array: MutableSequence[C], left: int, right: int, reverse: bool) -> None:
    if left >= right:
        return
    mid = (left + right) // 2
    _merge_sort(array, left, mid, reverse)
    _merge_sort(array, mid + 1, right, reverse)
    _merge(array, left, mid, right, reverse)


def _merge(array: MutableSequence[C], left: int, mid: int, right: int, reverse: bool) -> None:
    """Merge the sorted runs array[left:mid + 1] and array[mid + 1:right + 1]."""
    first = list(array[left : mid + 1])
    second = list(array[mid + 1 : right + 1])

    i = j = 0
    out = left
    while i < len(first) and j < len(second):
        if _precedes_or_ties(first[i], second[j], reverse):
            array[out] = first[i]
            i += 1
        else:
            array[out] = second[j]
            j += 1
        out += 1

    # At most one of these copies anything
    for element in first[i:]:
        array[out] = element
        out += 1
    for element in second[j:]:
        array[out] = element
        out += 1


def quick_sort(array: MutableSequence[C], reverse: bool = False) -> None:
    """
    Sort array in place with quicksort, pivoting on the middle index.

    The pivot is whatever element currently sits at the segment's midpoint.
    When a swap puts a different value there, partitioning re-reads the
    midpoint and restarts its scans from the segment ends. This relies on a
    strict total order; a relation that is not one may fail to terminate.
    Not stable.
    """
    logger.debug("quick_sort n=%d reverse=%s", len(array), reverse)
    _quick_sort(array, 0, len(array) - 1, reverse)


def _quick_sort(array: MutableSequence[C], left: int, right: int, reverse: bool) -> None:
    if left >= right:
        return
    bound = _partition(array, left, right, reverse)
    _quick_sort(array, left, bound, reverse)
    _quick_sort(array, bound + 1, right, reverse)


def _partition(array: MutableSequence[C], left: int, right: int, reverse: bool) -> int:
    """Partition array[left:right + 1] around its midpoint element; return the split index."""
    mid = (left + right) // 2
    pivot = array[mid]
    low = left - 1
    high = right + 1

    while True:
        # A swap put a different value at mid: re-read the pivot and rescan the
        # whole segment. Each such swap removes an inversion, so this is finite.
        if array[mid] != pivot:
            pivot = array[mid]
            low = left - 1
            high = right + 1

        high -= 1
        while _precedes(pivot, array[high], reverse):
            high -= 1

        low += 1
        while _precedes(array[low], pivot, reverse):
            low += 1

        if low < high:
            array[low], array[high] = array[high], array[low]
        else:
            return high


SORTS: dict[str, SortFunction] = {
    "selection": selection_sort,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "quick": quick_sort,
}
