"""In-place partition sort and binary search over ordinal-ordered word lists."""

from typing import List, Optional, Sequence


def quick_sort(words: List[str], start: int = 0, end: Optional[int] = None) -> None:
    """
    Sort words[start:end + 1] in place, ordinal ascending.

    The pivot is the midpoint of the active range. The smaller side is
    sorted recursively and the larger one in the loop, which keeps the
    stack depth logarithmic.
    """
    if end is None:
        end = len(words) - 1

    while start < end:
        pivot = partition(words, start, end, (start + end) // 2)
        if pivot - start < end - pivot:
            quick_sort(words, start, pivot - 1)
            start = pivot + 1
        else:
            quick_sort(words, pivot + 1, end)
            end = pivot - 1


def partition(words: List[str], start: int, end: int, pivot: int) -> int:
    """
    Partition words[start:end + 1] around words[pivot].

    Returns:
        The final index of the pivot value
    """
    words[pivot], words[end] = words[end], words[pivot]
    pivot_value = words[end]

    low = start
    for i in range(start, end):
        if words[i] <= pivot_value:
            words[low], words[i] = words[i], words[low]
            low += 1

    words[low], words[end] = words[end], words[low]
    return low


def binary_search(words: Sequence[str], target: str, low: int = 0, high: Optional[int] = None) -> int:
    """
    Find target in an ordinal-sorted sequence.

    Returns:
        Index of the match, or -1 if the word is absent
    """
    if high is None:
        high = len(words) - 1

    if low > high:
        return -1

    middle = (low + high) // 2
    if words[middle] == target:
        return middle
    if words[middle] < target:
        return binary_search(words, target, middle + 1, high)
    return binary_search(words, target, low, middle - 1)
