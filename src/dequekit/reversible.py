"""Decorator that adds in-place reversal to any deque."""

import logging
from collections.abc import Iterator

from dequekit.base import SimpleDeque
from dequekit.types import Capacity, T

logger = logging.getLogger(__name__)


class ReversibleDeque(SimpleDeque[T]):
    """
    Wraps a deque and adds reverse().

    The wrapped deque is owned by the decorator and must not be used
    directly after construction. Every contract operation is forwarded
    unchanged.
    """

    def __init__(self, data: SimpleDeque[T]) -> None:
        """
        Initialize the decorator.

        Args:
            data: Deque to wrap. It is owned by the decorator from here on.
        """
        self._data = data
        logger.debug("Wrapped %s in ReversibleDeque", type(data).__name__)

    def reverse(self) -> None:
        """
        Reverse the element order in place.

        Outer pairs are popped working inward, then pushed back innermost
        first with their sides swapped. At most size // 2 pairs are held at
        once and the wrapped deque never exceeds its original size, so a
        full bounded deque can be reversed.
        """
        if self.size() < 2:
            return
        logger.debug("Reversing deque of %d elements", self.size())
        pairs: list[tuple[T, T]] = []
        while self.size() >= 2:
            pairs.append((self.pop_left(), self.pop_right()))
        while pairs:
            old_front, old_rear = pairs.pop()
            self.push_left(old_rear)
            self.push_right(old_front)

    @property
    def capacity(self) -> Capacity:
        return self._data.capacity

    def size(self) -> int:
        return self._data.size()

    def is_empty(self) -> bool:
        return self._data.is_empty()

    def is_full(self) -> bool:
        return self._data.is_full()

    def push_left(self, e: T) -> None:
        self._data.push_left(e)

    def push_right(self, e: T) -> None:
        self._data.push_right(e)

    def peek_left(self) -> T:
        return self._data.peek_left()

    def peek_right(self) -> T:
        return self._data.peek_right()

    def pop_left(self) -> T:
        return self._data.pop_left()

    def pop_right(self) -> T:
        return self._data.pop_right()

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def reverse_iter(self) -> Iterator[T]:
        return self._data.reverse_iter()
