"""Circular-buffer deque with a fixed number of slots."""

import logging
from collections.abc import Iterator

from dequekit.base import SimpleDeque, validate_capacity
from dequekit.errors import DequeEmptyError, DequeFullError, InvalidCapacityError
from dequekit.types import T

logger = logging.getLogger(__name__)


class ArrayDeque(SimpleDeque[T]):
    """
    Bounded deque backed by a circular list of slots.

    Elements occupy the slots front, front + 1, ..., rear (mod capacity).
    Pushes and pops move the two indices instead of shifting elements, so
    every operation is O(1) and memory is O(capacity) regardless of size.
    """

    def __init__(self, capacity: int, source: SimpleDeque[T] | None = None) -> None:
        """
        Initialize the deque.

        Args:
            capacity: Number of slots; must be a positive integer.
            source: Optional deque whose elements are copied in, in the same
                left-to-right order. The source is not modified.

        Raises:
            InvalidCapacityError: If capacity is not positive, or source holds
                more than capacity elements.
        """
        validate_capacity(capacity, allow_unbounded=False)
        if source is not None and source.size() > capacity:
            raise InvalidCapacityError(
                f"Source holds {source.size()} elements, more than capacity {capacity}"
            )
        self._capacity = capacity
        self._slots: list[T | None] = [None] * capacity
        # Indices are only meaningful while size > 0
        self._front = 0
        self._rear = -1
        self._size = 0
        logger.debug("Created ArrayDeque with capacity %d", capacity)
        if source is not None:
            self._seed_from(source)

    @property
    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def _step_back(self, index: int) -> int:
        # capacity is added first so index 0 wraps to capacity - 1
        return (index - 1 + self._capacity) % self._capacity

    def _step_forward(self, index: int) -> int:
        return (index + 1) % self._capacity

    def push_left(self, e: T) -> None:
        """Insert e before the current front. O(1)."""
        if self.is_full():
            raise DequeFullError("Deque full")
        if self.is_empty():
            self._front = 0
            self._rear = self._front
        else:
            self._front = self._step_back(self._front)
        self._slots[self._front] = e
        self._size += 1

    def push_right(self, e: T) -> None:
        """Insert e after the current rear. O(1)."""
        if self.is_full():
            raise DequeFullError("Deque full")
        self._rear = self._step_forward(self._rear)
        if self.is_empty():
            self._front = self._rear
        self._slots[self._rear] = e
        self._size += 1

    def peek_left(self) -> T:
        if self.is_empty():
            raise DequeEmptyError("Deque empty")
        return self._slots[self._front]  # type: ignore[return-value]

    def peek_right(self) -> T:
        if self.is_empty():
            raise DequeEmptyError("Deque empty")
        return self._slots[self._rear]  # type: ignore[return-value]

    def pop_left(self) -> T:
        """Remove and return the front element, clearing its slot. O(1)."""
        element = self.peek_left()
        self._slots[self._front] = None
        self._front = self._step_forward(self._front)
        self._size -= 1
        return element

    def pop_right(self) -> T:
        """Remove and return the rear element, clearing its slot. O(1)."""
        element = self.peek_right()
        self._slots[self._rear] = None
        self._rear = self._step_back(self._rear)
        self._size -= 1
        return element

    def __iter__(self) -> Iterator[T]:
        # Start one slot behind front; the remaining count covers a full buffer,
        # where that slot is also rear.
        index = self._step_back(self._front)
        remaining = self._size
        while remaining > 0:
            index = self._step_forward(index)
            remaining -= 1
            yield self._slots[index]  # type: ignore[misc]
            if index == self._rear:
                return

    def reverse_iter(self) -> Iterator[T]:
        index = self._step_forward(self._rear)
        remaining = self._size
        while remaining > 0:
            index = self._step_back(index)
            remaining -= 1
            yield self._slots[index]  # type: ignore[misc]
            if index == self._front:
                return
