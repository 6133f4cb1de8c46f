"""Rotations, zero shifting and set operations on sorted lists."""

from typing import Sequence


def rotate_left_one(arr: Sequence[int]) -> list[int]:
    """Return a copy of arr shifted left by one place."""
    result = list(arr)
    if result:
        first = result.pop(0)
        result.append(first)
    return result


def rotate_left_one_copy(arr: Sequence[int]) -> list[int]:
    """Return a copy of arr shifted left by one place, built from slices."""
    return list(arr[1:]) + list(arr[:1])


def rotate_left(arr: Sequence[int], d: int) -> list[int]:
    """Return arr rotated left by d places using a temporary slice."""
    if not arr:
        return []
    d %= len(arr)
    head = list(arr[:d])
    return list(arr[d:]) + head


def rotate_left_reversal(arr: Sequence[int], d: int) -> list[int]:
    """Return arr rotated left by d places via three reversals."""
    if not arr:
        return []
    d %= len(arr)
    partial = list(reversed(arr[:d])) + list(reversed(arr[d:]))
    return partial[::-1]


def move_zeros_to_end(arr: Sequence[int]) -> list[int]:
    """Return a copy with non-zero values first, in order, then the zeros."""
    non_zero = [value for value in arr if value != 0]
    return non_zero + [0] * (len(arr) - len(non_zero))


def move_zeros_to_end_swapping(arr: Sequence[int]) -> list[int]:
    """Return a copy with zeros moved to the end by swapping past the first zero."""
    result = list(arr)
    try:
        slot = result.index(0)
    except ValueError:
        return result
    for position in range(slot + 1, len(result)):
        if result[position] != 0:
            result[position], result[slot] = result[slot], result[position]
            slot += 1
    return result


def union_sorted_set(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the sorted distinct values found in either list."""
    return sorted(set(a) | set(b))


def union_sorted(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Merge two sorted lists into their sorted distinct union."""
    result: list[int] = []

    def add(value: int) -> None:
        if not result or result[-1] != value:
            result.append(value)

    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] <= b[j]:
            add(a[i])
            i += 1
        else:
            add(b[j])
            j += 1
    for value in b[j:]:
        add(value)
    for value in a[i:]:
        add(value)
    return result


def intersection_sorted_brute(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Match each value of a with an unused equal value of b, stopping early on larger ones."""
    used = [False] * len(b)
    result = []
    for value in a:
        for position, other in enumerate(b):
            if value == other and not used[position]:
                result.append(other)
                used[position] = True
                break
            if value < other:
                break
    return result


def intersection_sorted(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the common values of two sorted lists, duplicates matched pairwise."""
    result = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            i += 1
        elif a[i] > b[j]:
            j += 1
        else:
            result.append(b[j])
            i += 1
            j += 1
    return result