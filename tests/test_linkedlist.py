"""Tests for the doubly-linked deque implementation."""

import pytest

from dequekit import (
    UNBOUNDED,
    ArrayDeque,
    DequeEmptyError,
    DequeFullError,
    InvalidCapacityError,
)
from dequekit.linkedlist import LinkedDeque, Node


def test_node_creation() -> None:
    """Test creating a node."""
    node = Node("value1")
    assert node.element == "value1"
    assert node.prev is None
    assert node.next is None


def test_empty_deque() -> None:
    """Test empty deque behavior."""
    dq = LinkedDeque[int]()
    assert dq.size() == 0
    assert len(dq) == 0
    assert dq.is_empty()
    assert not dq
    assert not dq.is_full()
    assert dq.capacity is UNBOUNDED
    assert list(dq) == []
    assert list(dq.reverse_iter()) == []


def test_unbounded_never_full() -> None:
    """Test that an unbounded deque accepts many elements."""
    dq = LinkedDeque[int]()
    for i in range(1000):
        dq.push_right(i)
    assert dq.size() == 1000
    assert not dq.is_full()


def test_push_right() -> None:
    """Test pushing on the right keeps FIFO order from the left."""
    dq = LinkedDeque[str]()
    dq.push_right("a")
    assert dq.size() == 1
    assert bool(dq)

    dq.push_right("b")
    assert dq.size() == 2

    assert dq.pop_left() == "a"
    assert dq.pop_left() == "b"
    assert dq.size() == 0


def test_push_left() -> None:
    """Test pushing on the left reverses arrival order."""
    dq = LinkedDeque[str]()
    dq.push_left("a")
    dq.push_left("b")

    assert dq.pop_left() == "b"
    assert dq.pop_left() == "a"


def test_peek_does_not_remove() -> None:
    """Test peeking at both ends."""
    dq = LinkedDeque[int]()
    dq.push_right(1)
    dq.push_right(2)
    dq.push_right(3)

    assert dq.peek_left() == 1
    assert dq.peek_right() == 3
    assert dq.size() == 3


def test_single_node_is_both_ends() -> None:
    """Test operations on a single-node deque."""
    dq = LinkedDeque[int]()
    dq.push_left(7)
    assert dq.peek_left() == 7
    assert dq.peek_right() == 7

    assert dq.pop_right() == 7
    assert dq.is_empty()
    assert not dq

    # Both ends must be reset so the next push works from either side
    dq.push_right(8)
    assert dq.peek_left() == 8
    assert dq.pop_left() == 8
    assert dq.is_empty()


def test_bounded_capacity_scenario() -> None:
    """Test that a capacity-2 deque rejects a third push."""
    dq = LinkedDeque[int](2)
    dq.push_left(1)
    dq.push_left(2)
    assert dq.is_full()

    with pytest.raises(DequeFullError):
        dq.push_left(3)
    with pytest.raises(DequeFullError):
        dq.push_right(3)

    # Failed pushes leave the deque untouched
    assert list(dq) == [2, 1]
    assert dq.size() == 2


def test_empty_errors() -> None:
    """Test peek and pop on an empty deque."""
    dq = LinkedDeque[int](1)
    for operation in (dq.peek_left, dq.peek_right, dq.pop_left, dq.pop_right):
        with pytest.raises(DequeEmptyError):
            operation()
    assert dq.size() == 0


def test_empty_error_is_index_error() -> None:
    """Test that empty errors can be caught as IndexError."""
    dq = LinkedDeque[int]()
    with pytest.raises(IndexError):
        dq.pop_left()


@pytest.mark.parametrize("capacity", [0, -1, -100])
def test_invalid_capacity(capacity: int) -> None:
    """Test that non-positive capacities are rejected."""
    with pytest.raises(InvalidCapacityError):
        LinkedDeque[int](capacity)


def test_invalid_capacity_type() -> None:
    """Test that non-integer capacities are rejected."""
    with pytest.raises(InvalidCapacityError):
        LinkedDeque[int](2.5)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        LinkedDeque[int](True)  # type: ignore[arg-type]


def test_mixed_operations() -> None:
    """Test mixed push_left/push_right operations."""
    dq = LinkedDeque[int]()
    dq.push_right(1)  # [1]
    dq.push_left(2)  # [2, 1]
    dq.push_right(3)  # [2, 1, 3]
    dq.push_left(4)  # [4, 2, 1, 3]

    assert list(dq) == [4, 2, 1, 3]
    assert list(dq.reverse_iter()) == [3, 1, 2, 4]
    assert list(reversed(dq)) == [3, 1, 2, 4]

    assert dq.pop_left() == 4
    assert dq.pop_right() == 3
    assert dq.pop_left() == 2
    assert dq.pop_right() == 1
    assert dq.is_empty()


def test_pop_right_then_iterate() -> None:
    """Test that traversal stops at the new tail after pop_right."""
    dq = LinkedDeque[int]()
    for i in range(5):
        dq.push_right(i)

    dq.pop_right()
    dq.pop_left()

    assert list(dq) == [1, 2, 3]
    assert list(dq.reverse_iter()) == [3, 2, 1]


def test_traversal_is_lazy_and_one_shot() -> None:
    """Test that a traversal can be consumed only once."""
    dq = LinkedDeque[int]()
    dq.push_right(1)
    dq.push_right(2)

    forward = iter(dq)
    assert next(forward) == 1
    assert next(forward) == 2
    with pytest.raises(StopIteration):
        next(forward)
    with pytest.raises(StopIteration):
        next(forward)


def test_copy_from_other_deque() -> None:
    """Test seeding from another deque copies order and leaves the source intact."""
    source = LinkedDeque[int]()
    for i in (1, 2, 3):
        source.push_right(i)

    copy = LinkedDeque[int](source=source)
    assert list(copy) == [1, 2, 3]
    assert list(source) == [1, 2, 3]
    assert copy.capacity is UNBOUNDED

    # Independent storage
    copy.pop_left()
    assert source.size() == 3


def test_copy_from_array_deque_with_capacity() -> None:
    """Test seeding from a circular deque into a bounded linked deque."""
    source = ArrayDeque[int](3)
    source.push_left(1)
    source.push_left(2)
    source.push_left(3)

    copy = LinkedDeque[int](3, source)
    assert list(copy) == [3, 2, 1]
    assert copy.is_full()
    assert list(source) == [3, 2, 1]


def test_copy_exceeding_capacity() -> None:
    """Test that seeding from a larger deque is rejected before any copy."""
    source = LinkedDeque[int]()
    for i in range(3):
        source.push_right(i)

    with pytest.raises(InvalidCapacityError):
        LinkedDeque[int](2, source)
    assert list(source) == [0, 1, 2]


def test_popped_nodes_are_unlinked() -> None:
    """Test that detached nodes do not keep references into the chain."""
    dq = LinkedDeque[int]()
    dq.push_right(1)
    dq.push_right(2)
    dq.push_right(3)

    head = dq._head
    tail = dq._tail
    assert head is not None and tail is not None

    dq.pop_left()
    dq.pop_right()
    assert head.next is None
    assert tail.prev is None
    assert dq._head is dq._tail


def test_stress_rapid_pushes_and_pops() -> None:
    """Test rapid pushes and pops maintaining consistency."""
    dq = LinkedDeque[int]()
    model: list[int] = []

    for i in range(30):
        if i % 2 == 0:
            dq.push_right(i)
            model.append(i)
        else:
            dq.push_left(i)
            model.insert(0, i)

    assert dq.size() == 30

    for i in range(15):
        if i % 3 == 0:
            assert dq.pop_right() == model.pop()
        else:
            assert dq.pop_left() == model.pop(0)

    assert dq.size() == 15
    assert list(dq) == model
    assert list(dq.reverse_iter()) == model[::-1]


def test_repr() -> None:
    """Test the repr shows contents and capacity."""
    dq = LinkedDeque[int](4)
    dq.push_right(1)
    dq.push_right(2)
    assert repr(dq) == "LinkedDeque([1, 2], capacity=4)"
