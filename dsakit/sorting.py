"""Classic comparison sorts and a merge of two sorted sequences."""

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list sorted by repeated adjacent swaps."""
    result = list(items)
    for unsorted_end in range(len(result) - 1, 0, -1):
        for j in range(unsorted_end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list built by inserting each element in place."""
    result: list[Any] = []
    for value in items:
        position = len(result)
        while position > 0 and result[position - 1] > value:
            position -= 1
        result.insert(position, value)
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list by repeatedly selecting the minimum."""
    result = list(items)
    for i in range(len(result) - 1):
        min_index = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[min_index] = result[min_index], result[i]
    return result


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Merge two ascending sequences into one ascending list.

    On ties the element of ``second`` is taken first.
    """
    left, right = list(first), list(second)
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged