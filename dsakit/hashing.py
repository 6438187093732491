"""Frequency counting with hash maps."""

from collections import Counter
from collections.abc import Hashable, Iterable


def highest_frequency(values: Iterable[int]) -> tuple[int, int]:
    """Return the most frequent value and its count.

    Ties go to the smallest value. An empty input raises ValueError.
    """
    counts = Counter(values)
    if not counts:
        raise ValueError("no values to count")
    top = max(counts.values())
    value = min(v for v, c in counts.items() if c == top)
    return value, top


def frequency_table(values: Iterable[Hashable]) -> dict:
    """Return a mapping of each value to its count, ordered by value."""
    return dict(sorted(Counter(values).items()))


def char_counts(text: str) -> Counter:
    """Return how many times each character occurs in ``text``.

    Looking up an absent character gives 0.
    """
    return Counter(text)