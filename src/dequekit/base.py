"""The capability contract shared by every deque backing store."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic

from dequekit.errors import InvalidCapacityError
from dequekit.types import Capacity, T

logger = logging.getLogger(__name__)


def validate_capacity(capacity: Capacity, *, allow_unbounded: bool) -> None:
    """Raise InvalidCapacityError unless capacity is a positive int (or UNBOUNDED when allowed)."""
    if capacity is None:
        if not allow_unbounded:
            raise InvalidCapacityError("Capacity must be a positive integer, got None")
        return
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidCapacityError(f"Capacity must be an integer, got {type(capacity).__name__}")
    if capacity <= 0:
        raise InvalidCapacityError(f"Capacity must be positive, got {capacity}")


class SimpleDeque(ABC, Generic[T]):
    """
    Double-ended queue with bounded or unbounded capacity.

    Subclasses provide constant-time push, peek and pop at both ends, size
    queries, and lazy traversal in both directions. The dunder helpers
    defined here are expressed purely in terms of that contract.
    """

    @property
    @abstractmethod
    def capacity(self) -> Capacity:
        """Maximum number of elements, or None when unbounded."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of stored elements."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the deque holds no elements."""

    @abstractmethod
    def is_full(self) -> bool:
        """Return True if no further element can be pushed."""

    @abstractmethod
    def push_left(self, e: T) -> None:
        """
        Insert e as the new leftmost element.

        Raises:
            DequeFullError: If the deque is at capacity.
        """

    @abstractmethod
    def push_right(self, e: T) -> None:
        """
        Insert e as the new rightmost element.

        Raises:
            DequeFullError: If the deque is at capacity.
        """

    @abstractmethod
    def peek_left(self) -> T:
        """
        Return the leftmost element without removing it.

        Raises:
            DequeEmptyError: If the deque is empty.
        """

    @abstractmethod
    def peek_right(self) -> T:
        """
        Return the rightmost element without removing it.

        Raises:
            DequeEmptyError: If the deque is empty.
        """

    @abstractmethod
    def pop_left(self) -> T:
        """
        Remove and return the leftmost element.

        Raises:
            DequeEmptyError: If the deque is empty.
        """

    @abstractmethod
    def pop_right(self) -> T:
        """
        Remove and return the rightmost element.

        Raises:
            DequeEmptyError: If the deque is empty.
        """

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Iterate from leftmost to rightmost. The deque must not change meanwhile."""

    @abstractmethod
    def reverse_iter(self) -> Iterator[T]:
        """Iterate from rightmost to leftmost. The deque must not change meanwhile."""

    def _seed_from(self, source: "SimpleDeque[T]") -> None:
        """Copy source into this (empty) deque, leaving source untouched."""
        logger.debug("Seeding %s with %d elements", type(self).__name__, source.size())
        for element in source.reverse_iter():
            self.push_left(element)

    def __reversed__(self) -> Iterator[T]:
        return self.reverse_iter()

    def __len__(self) -> int:
        """Return the number of stored elements."""
        return self.size()

    def __bool__(self) -> bool:
        """Return True if the deque is non-empty."""
        return not self.is_empty()

    def __repr__(self) -> str:
        items = ", ".join(repr(e) for e in self)
        return f"{type(self).__name__}([{items}], capacity={self.capacity!r})"
