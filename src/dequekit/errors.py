"""Exception classes for dequekit."""


class DequeError(Exception):
    """Base exception for all dequekit errors."""


class InvalidCapacityError(DequeError, ValueError):
    """Raised when a capacity is not a positive integer or cannot hold the seeding deque."""


class DequeFullError(DequeError):
    """Raised when pushing onto a bounded deque that is already at capacity."""


class DequeEmptyError(DequeError, IndexError):
    """Raised when peeking or popping from an empty deque."""
