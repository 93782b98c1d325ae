"""Searching in sorted, rotated and two-dimensional sequences."""

from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in the ascending ``items``, or -1 if absent."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        if items[mid] == key:
            return mid
        if key > items[mid]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def _bounded_search(items: Sequence[Any], key: Any, leftmost: bool) -> int:
    start, end = 0, len(items) - 1
    found = -1
    while start <= end:
        mid = start + (end - start) // 2
        if items[mid] == key:
            found = mid
            if leftmost:
                end = mid - 1
            else:
                start = mid + 1
        elif key > items[mid]:
            start = mid + 1
        else:
            end = mid - 1
    return found


def first_occurrence(items: Sequence[Any], key: Any) -> int:
    """Return the lowest index of ``key`` in the ascending ``items``, or -1."""
    return _bounded_search(items, key, leftmost=True)


def last_occurrence(items: Sequence[Any], key: Any) -> int:
    """Return the highest index of ``key`` in the ascending ``items``, or -1."""
    return _bounded_search(items, key, leftmost=False)


def find_pivot(items: Sequence[Any]) -> int:
    """Return the index of the smallest element of a rotated ascending sequence.

    A sequence that is not rotated yields ``len(items)``.
    """
    start, end = 0, len(items)
    while start < end:
        mid = start + (end - start) // 2
        if items[mid] >= items[0]:
            start = mid + 1
        else:
            end = mid
    return start


def matrix_contains(matrix: Iterable[Iterable[Any]], element: Any) -> bool:
    """Return True if ``element`` appears anywhere in ``matrix``."""
    return any(element in row for row in matrix)