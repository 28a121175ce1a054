"""Type definitions for dequekit."""

from typing import Any, Protocol, TypeAlias, TypeVar

# Element type stored in a deque
T = TypeVar("T")

# Capacity of a deque; UNBOUNDED disables the limit
Capacity: TypeAlias = int | None
UNBOUNDED: Capacity = None


class Comparable(Protocol):
    """Elements that support the ordering operators used by the sorts."""

    def __lt__(self, other: Any, /) -> bool: ...
    def __le__(self, other: Any, /) -> bool: ...
    def __gt__(self, other: Any, /) -> bool: ...
    def __ge__(self, other: Any, /) -> bool: ...


# Element type of a sortable list
C = TypeVar("C", bound=Comparable)
