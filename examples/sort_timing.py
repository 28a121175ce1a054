"""Time each dequekit sort on random, sorted, and reverse-sorted integer lists.

Usage:
    python examples/sort_timing.py [length] [--order random|sorted|reversed]
"""

import argparse
import random
import time

from dequekit import SORTS


def generate_lists(rng: random.Random, order: str, length: int) -> list[list[int]]:
    """Return one independent copy of the same input per sort."""
    base = [rng.randint(-(2**31), 2**31 - 1) for _ in range(length)]
    if order == "sorted":
        base.sort()
    elif order == "reversed":
        base.sort(reverse=True)
    return [list(base) for _ in SORTS]


def check_sorted(name: str, values: list[int]) -> None:
    """Raise RuntimeError if the named sort left values out of ascending order."""
    if values != sorted(values):
        raise RuntimeError(f"{name} sort produced unsorted output")


def time_sort(name: str, values: list[int]) -> float:
    """Sort values ascending with the named sort; return elapsed nanoseconds."""
    start = time.perf_counter_ns()
    SORTS[name](values, False)
    return time.perf_counter_ns() - start


def main() -> None:
    """Warm up every sort, then print one timing per sort."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("length", nargs="?", type=int, default=1000)
    parser.add_argument("--order", choices=("random", "sorted", "reversed"), default="random")
    args = parser.parse_args()

    rng = random.Random()

    # The first sort called tends to run slow; call each once on a small list
    for name, values in zip(SORTS, generate_lists(rng, "random", 7)):
        SORTS[name](values, False)

    print(f"=== {args.order} input, length {args.length} ===\n")
    for name, values in zip(SORTS, generate_lists(rng, args.order, args.length)):
        elapsed = time_sort(name, values)
        check_sorted(name, values)
        print(f"{name:>10} sort: {elapsed:>12,} ns")


if __name__ == "__main__":
    main()
