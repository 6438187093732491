"""Dynamic-programming solutions to classic sequence problems."""

from collections.abc import Sequence


def edit_distance(word1: str, word2: str) -> int:
    """Return the Levenshtein distance between two strings.

    Insertions, deletions and substitutions each cost one.
    """
    previous = list(range(len(word2) + 1))
    for i, ca in enumerate(word1, start=1):
        current = [i]
        for j, cb in enumerate(word2, start=1):
            if ca == cb:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def longest_common_subsequence(text1: Sequence, text2: Sequence) -> int:
    """Return the length of the longest common subsequence of two sequences."""
    previous = [0] * (len(text2) + 1)
    for ca in text1:
        current = [0]
        for j, cb in enumerate(text2, start=1):
            if ca == cb:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_increasing_subsequence(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence.

    An empty sequence reports 1.
    """
    lengths: list[int] = []
    for x in nums:
        best = max((length for y, length in zip(nums, lengths) if y < x), default=0)
        lengths.append(best + 1)
    return max(lengths, default=1)


def longest_palindromic_subsequence(s: str) -> int:
    """Return the length of the longest palindromic subsequence of ``s``."""
    return longest_common_subsequence(s, s[::-1])