"""Classic sorting algorithms; each returns a new sorted list."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent pairs, stopping early once sorted."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def counting_sort(items: Iterable[int]) -> list[int]:
    """Sort integers by counting occurrences of each value in their range."""
    values = [operator.index(value) for value in items]
    if not values:
        return []
    low = min(values)
    counts = [0] * (max(values) - low + 1)
    for value in values:
        counts[value - low] += 1
    return [low + offset for offset, count in enumerate(counts) for _ in range(count)]


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and current < result[j]:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging them (stable)."""
    result = list(items)
    if len(result) <= 1:
        return result
    middle = (len(result) + 1) // 2
    return _merge(merge_sort(result[:middle]), merge_sort(result[middle:]))


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the last element of each range."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = result[high]
        boundary = low
        for j in range(low, high):
            if result[j] <= pivot:
                result[boundary], result[j] = result[j], result[boundary]
                boundary += 1
        result[boundary], result[high] = result[high], result[boundary]
        pending.append((low, boundary - 1))
        pending.append((boundary + 1, high))
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result