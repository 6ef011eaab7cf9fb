"""
Similar-text scoring.

Implements the classic recursive "similar text" measure: find the longest
common run of characters, count it, then recurse into the unmatched text on
its left and on its right. The percentage is
``2 * matched / (len(a) + len(b)) * 100``.
"""

from typing import Tuple


def _longest_common_run(first: str, second: str) -> Tuple[int, int, int]:
    """
    Locate the longest common substring.

    Returns:
        Tuple[int, int, int]: (offset in first, offset in second, length).
            Ties keep the earliest run found scanning ``first`` then
            ``second``; length 0 means nothing matched.
    """
    best_first = best_second = best_length = 0

    for i in range(len(first)):
        for j in range(len(second)):
            length = 0
            while (
                i + length < len(first)
                and j + length < len(second)
                and first[i + length] == second[j + length]
            ):
                length += 1
            if length > best_length:
                best_first, best_second, best_length = i, j, length

    return best_first, best_second, best_length


def similar_chars(first: str, second: str) -> int:
    """Count characters shared by ``first`` and ``second`` under the run-matching scheme."""
    pos_first, pos_second, length = _longest_common_run(first, second)
    if length == 0:
        return 0

    total = length
    if pos_first and pos_second:
        total += similar_chars(first[:pos_first], second[:pos_second])

    end_first = pos_first + length
    end_second = pos_second + length
    if end_first < len(first) and end_second < len(second):
        total += similar_chars(first[end_first:], second[end_second:])

    return total


def similarity_percent(first: str, second: str) -> float:
    """
    Percentage similarity between two strings.

    Args:
        first (str): First string
        second (str): Second string

    Returns:
        float: Score in ``[0, 100]``. Two empty strings score 0.

    Example:
        >>> similarity_percent("World", "Word")
        88.88888888888889
    """
    total_length = len(first) + len(second)
    if total_length == 0:
        return 0.0
    return similar_chars(first, second) * 2 * 100 / total_length
