"""Basic usage example for dequekit."""

from dequekit import ArrayDeque, DequeFullError, LinkedDeque, ReversibleDeque


def main() -> None:
    """Demonstrate both backing stores and in-place reversal."""
    print("=== Circular-buffer deque ===\n")
    ring = ArrayDeque[int](3)
    for value in (1, 2, 3):
        ring.push_left(value)
    print(f"Left to right: {list(ring)}")
    print(f"Right to left: {list(ring.reverse_iter())}")
    print(f"Full: {ring.is_full()}")

    try:
        ring.push_right(4)
    except DequeFullError as exc:
        print(f"push_right(4) rejected: {exc}")

    print(f"pop_right() -> {ring.pop_right()}, size now {ring.size()}\n")

    print("=== Linked deque seeded from the ring ===\n")
    chain = LinkedDeque[int](source=ring)
    chain.push_right(10)
    print(f"Copy: {list(chain)} (source still {list(ring)})\n")

    print("=== Reversal ===\n")
    reversible = ReversibleDeque(chain)
    reversible.reverse()
    print(f"Reversed: {list(reversible)}")


if __name__ == "__main__":
    main()
