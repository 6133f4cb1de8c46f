"""Basic queries over integer lists: order checks, extremes, search and counting."""

from collections import Counter
from functools import reduce
from itertools import pairwise
from operator import xor
from typing import Optional, Sequence


def is_sorted_brute(arr: Sequence[int]) -> bool:
    """Return True if no later element is smaller than an earlier one (pairwise check)."""
    return all(
        later >= value
        for position, value in enumerate(arr)
        for later in arr[position + 1:]
    )


def is_sorted(arr: Sequence[int]) -> bool:
    """Return True if every element is at least as large as its predecessor."""
    return all(current >= previous for previous, current in pairwise(arr))


def largest_by_sorting(arr: Sequence[int]) -> int:
    """Return the largest element by sorting a copy of the input."""
    if not arr:
        raise ValueError("largest_by_sorting() needs a non-empty sequence")
    return sorted(arr)[-1]


def largest(arr: Sequence[int]) -> int:
    """Return the largest element in a single pass."""
    if not arr:
        raise ValueError("largest() needs a non-empty sequence")
    best = arr[0]
    for value in arr:
        if value > best:
            best = value
    return best


def second_largest_by_sorting(arr: Sequence[int]) -> Optional[int]:
    """Return the largest value strictly below the maximum, or None if there is none."""
    if not arr:
        raise ValueError("second_largest_by_sorting() needs a non-empty sequence")
    ordered = sorted(arr)
    top = ordered[-1]
    return next((value for value in reversed(ordered[:-1]) if value != top), None)


def second_largest_two_pass(arr: Sequence[int]) -> Optional[int]:
    """Find the maximum, then the largest value different from it; None if absent."""
    if not arr:
        return None
    top = max(arr)
    return max((value for value in arr if value != top), default=None)


def second_largest(arr: Sequence[int]) -> int:
    """Single-pass second largest for non-negative values; -1 when none exists."""
    if not arr:
        raise ValueError("second_largest() needs a non-empty sequence")
    top = arr[0]
    runner_up = -1
    for value in arr[1:]:
        if value > top:
            runner_up, top = top, value
        elif runner_up < value < top:
            runner_up = value
    return runner_up


def linear_search(arr: Sequence[int], target: int) -> bool:
    """Return True if target occurs in arr."""
    return any(value == target for value in arr)


def max_consecutive_ones(arr: Sequence[int]) -> int:
    """Return the length of the longest run of 1s."""
    best = run = 0
    for value in arr:
        if value == 1:
            run += 1
            best = max(best, run)
        elif value == 0:
            run = 0
    return best


def single_number_brute(arr: Sequence[int]) -> Optional[int]:
    """Return the first element that occurs exactly once, or None."""
    return next((value for value in arr if arr.count(value) == 1), None)


def single_number_hash(arr: Sequence[int]) -> Optional[int]:
    """Count occurrences in a table indexed by value (values must be non-negative)."""
    if not arr:
        raise ValueError("single_number_hash() needs a non-empty sequence")
    if min(arr) < 0:
        raise ValueError("single_number_hash() needs non-negative values")
    counts = [0] * (max(arr) + 1)
    for value in arr:
        counts[value] += 1
    return next((value for value in arr if counts[value] == 1), None)


def single_number_counter(arr: Sequence[int]) -> int:
    """Return the largest value that occurs exactly once, or 0 if none does."""
    counts = Counter(arr)
    return max((value for value, count in counts.items() if count == 1), default=0)


def single_number_xor(arr: Sequence[int]) -> int:
    """XOR all values together; pairs cancel, leaving the lone element."""
    return reduce(xor, arr, 0)


def missing_number_brute(nums: Sequence[int]) -> int:
    """Return the smallest value in 0..n-1 absent from nums, else n."""
    return next((candidate for candidate in range(len(nums)) if candidate not in nums), len(nums))


def missing_number_hash(arr: Sequence[int]) -> Optional[int]:
    """Mark values 0..n in a table; return the first unmarked one below n, or None."""
    n = len(arr)
    seen = [False] * (n + 1)
    for value in arr:
        if not 0 <= value <= n:
            raise ValueError(f"value {value} is outside the range 0..{n}")
        seen[value] = True
    return next((candidate for candidate in range(n) if not seen[candidate]), None)


def missing_number_sum(arr: Sequence[int]) -> int:
    """Return the missing value of 0..n using the arithmetic series sum."""
    n = len(arr)
    return n * (n + 1) // 2 - sum(arr)


def remove_duplicates(arr: list[int]) -> int:
    """Compact the unique values of a sorted list to its front; return their count."""
    if not arr:
        return 0
    last = 0
    for value in arr[1:]:
        if value != arr[last]:
            last += 1
            arr[last] = value
    return last + 1