"""Doubly-linked deque implementation for O(1) operations at both ends."""

import logging
from collections.abc import Iterator
from typing import Generic

from dequekit.base import SimpleDeque, validate_capacity
from dequekit.errors import DequeEmptyError, DequeFullError, InvalidCapacityError
from dequekit.types import UNBOUNDED, Capacity, T

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    """A node in the doubly-linked chain."""

    __slots__ = ("element", "prev", "next")

    def __init__(self, element: T) -> None:
        self.element = element
        self.prev: Node[T] | None = None
        self.next: Node[T] | None = None


class LinkedDeque(SimpleDeque[T]):
    """
    Deque backed by a chain of doubly-linked nodes.

    The deque owns every node; prev/next are navigation links only and are
    cleared when a node is detached. Capacity is optional: with the default
    UNBOUNDED the deque never reports itself full.
    """

    def __init__(
        self,
        capacity: Capacity = UNBOUNDED,
        source: SimpleDeque[T] | None = None,
    ) -> None:
        """
        Initialize the deque.

        Args:
            capacity: Maximum number of elements, or UNBOUNDED (None).
            source: Optional deque whose elements are copied in, in the same
                left-to-right order. The source is not modified.

        Raises:
            InvalidCapacityError: If capacity is not positive, or source holds
                more than capacity elements.
        """
        validate_capacity(capacity, allow_unbounded=True)
        if source is not None and capacity is not None and source.size() > capacity:
            raise InvalidCapacityError(
                f"Source holds {source.size()} elements, more than capacity {capacity}"
            )
        self._capacity = capacity
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size = 0
        logger.debug("Created LinkedDeque with capacity %s", capacity)
        if source is not None:
            self._seed_from(source)

    @property
    def capacity(self) -> Capacity:
        return self._capacity

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._capacity is not None and self._size == self._capacity

    def push_left(self, e: T) -> None:
        """Link a new node before head. O(1)."""
        if self.is_full():
            raise DequeFullError("Deque full")
        node = Node(e)
        if self._head is None:
            # Both ends point at the only node
            self._tail = node
        else:
            self._head.prev = node
            node.next = self._head
        self._head = node
        self._size += 1

    def push_right(self, e: T) -> None:
        """Link a new node after tail. O(1)."""
        if self.is_full():
            raise DequeFullError("Deque full")
        node = Node(e)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
            node.prev = self._tail
        self._tail = node
        self._size += 1

    def peek_left(self) -> T:
        if self._head is None:
            raise DequeEmptyError("Deque is empty")
        return self._head.element

    def peek_right(self) -> T:
        if self._tail is None:
            raise DequeEmptyError("Deque is empty")
        return self._tail.element

    def pop_left(self) -> T:
        """Detach and return the head element. O(1)."""
        node = self._head
        if node is None:
            raise DequeEmptyError("Deque is empty")
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        node.next = None
        self._size -= 1
        return node.element

    def pop_right(self) -> T:
        """Detach and return the tail element. O(1)."""
        node = self._tail
        if node is None:
            raise DequeEmptyError("Deque is empty")
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        node.prev = None
        self._size -= 1
        return node.element

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.element
            node = node.next

    def reverse_iter(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.element
            node = node.prev
