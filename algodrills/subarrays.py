"""Longest and counted contiguous subarrays with a given sum."""

from collections import Counter
from itertools import accumulate
from typing import Sequence


def longest_subarray_with_sum_cubic(arr: Sequence[int], k: int) -> int:
    """Length of the longest subarray summing to k, summing every slice afresh."""
    best = 0
    for start in range(len(arr)):
        for end in range(start, len(arr)):
            if sum(arr[start:end + 1]) == k:
                best = max(best, end - start + 1)
    return best


def longest_subarray_with_sum_quadratic(arr: Sequence[int], k: int) -> int:
    """Length of the longest subarray summing to k, extending a running sum."""
    best = 0
    for start in range(len(arr)):
        for length, total in enumerate(accumulate(arr[start:]), start=1):
            if total == k:
                best = max(best, length)
    return best


def longest_subarray_with_sum(arr: Sequence[int], k: int) -> int:
    """Length of the longest subarray summing to k, via first-seen prefix sums."""
    first_seen: dict[int, int] = {}
    best = 0
    total = 0
    for index, value in enumerate(arr):
        total += value
        if total == k:
            best = max(best, index + 1)
        earlier = first_seen.get(total - k)
        if earlier is not None:
            best = max(best, index - earlier)
        first_seen.setdefault(total, index)
    return best


def longest_subarray_with_sum_positive(arr: Sequence[int], k: int) -> int:
    """Sliding-window version, correct for non-negative values."""
    if not arr:
        return 0
    left = right = 0
    total = arr[0]
    best = 0
    while right < len(arr):
        while left <= right and total > k:
            total -= arr[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
        right += 1
        if right < len(arr):
            total += arr[right]
    return best


def count_subarrays_with_sum_cubic(arr: Sequence[int], k: int) -> int:
    """Count subarrays summing to k by summing every slice afresh."""
    return sum(
        1
        for start in range(len(arr))
        for end in range(start, len(arr))
        if sum(arr[start:end + 1]) == k
    )


def count_subarrays_with_sum_quadratic(arr: Sequence[int], k: int) -> int:
    """Count subarrays summing to k by extending a running sum from each start."""
    return sum(
        1
        for start in range(len(arr))
        for total in accumulate(arr[start:])
        if total == k
    )


def count_subarrays_with_sum(arr: Sequence[int], k: int) -> int:
    """Count subarrays summing to k using a table of prefix-sum frequencies."""
    prefix_counts = Counter({0: 1})
    total = 0
    count = 0
    for value in arr:
        total += value
        count += prefix_counts[total - k]
        prefix_counts[total] += 1
    return count