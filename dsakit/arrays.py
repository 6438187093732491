"""In-place array operations."""

from collections.abc import MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T")


def merge_sorted(
    nums1: MutableSequence, m: int, nums2: Sequence, n: int
) -> MutableSequence:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``.

    Both prefixes must be sorted. The merged result overwrites the first
    ``m + n`` slots of ``nums1``, which is also returned.
    """
    if m < 0 or n < 0:
        raise ValueError("counts must not be negative")
    if m > len(nums1) or n > len(nums2):
        raise ValueError("count exceeds sequence length")
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged result")

    left, right = list(nums1[:m]), list(nums2[:n])
    merged = []
    i = j = 0
    while i < m and j < n:
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    nums1[: m + n] = merged
    return nums1


def reverse_array(items: MutableSequence[T]) -> MutableSequence[T]:
    """Reverse ``items`` in place by swapping mirrored pairs; return it."""
    size = len(items)
    for front in range(size // 2):
        back = size - front - 1
        items[front], items[back] = items[back], items[front]
    return items