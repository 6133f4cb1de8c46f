"""Leaders, permutations, three-value sorting, pair sums and consecutive runs."""

from typing import Sequence


def leaders(arr: Sequence[int]) -> list[int]:
    """Return, in order, the elements that no later element exceeds."""
    return [
        value
        for position, value in enumerate(arr)
        if all(value >= later for later in arr[position + 1:])
    ]


def next_permutation_inplace(nums: list[int]) -> None:
    """Rearrange nums into its next lexicographic permutation, wrapping to the first."""
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]),
        None,
    )
    if pivot is None:
        nums.reverse()
        return
    successor = next(i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1:] = reversed(nums[pivot + 1:])


def next_permutation(arr: Sequence[int]) -> list[int]:
    """Return the next lexicographic permutation of arr as a new list."""
    result = list(arr)
    next_permutation_inplace(result)
    return result


def sort_colors_counting(arr: Sequence[int]) -> list[int]:
    """Return the 0s, then the 1s, then every remaining slot filled with 2."""
    zeros = arr.count(0)
    ones = arr.count(1)
    return [0] * zeros + [1] * ones + [2] * (len(arr) - zeros - ones)


def sort_colors(arr: Sequence[int]) -> list[int]:
    """Sort a list of 0s, 1s and 2s with the three-way partition (Dutch flag)."""
    result = list(arr)
    low = mid = 0
    high = len(result) - 1
    while mid <= high:
        if result[mid] == 0:
            result[low], result[mid] = result[mid], result[low]
            low += 1
            mid += 1
        elif result[mid] == 1:
            mid += 1
        else:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
    return result


def two_sum_brute(arr: Sequence[int], target: int) -> list[tuple[int, int]]:
    """For each element, pair it with the first other element completing the target."""
    pairs = []
    for i, value in enumerate(arr):
        partner = next(
            (other for j, other in enumerate(arr) if j != i and value + other == target),
            None,
        )
        if partner is not None:
            pairs.append((value, partner))
    return pairs


def two_sum_hash(arr: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Return (earlier, current) pairs summing to target, found with a set of seen values."""
    seen: set[int] = set()
    pairs = []
    for value in arr:
        wanted = target - value
        if wanted in seen:
            pairs.append((wanted, value))
        seen.add(value)
    return pairs


def two_sum_two_pointer(arr: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Sort a copy and close in from both ends, collecting pairs that hit the target."""
    ordered = sorted(arr)
    left, right = 0, len(ordered) - 1
    pairs = []
    while left <= right:
        total = ordered[left] + ordered[right]
        if total == target:
            pairs.append((ordered[left], ordered[right]))
            left += 1
            right -= 1
        elif total > target:
            right -= 1
        else:
            left += 1
    return pairs


def longest_consecutive_brute(arr: Sequence[int]) -> int:
    """Longest run of consecutive integers, extending each start by linear search."""
    best = 0
    for value in arr:
        current, length = value, 1
        while current + 1 in arr:
            current += 1
            length += 1
        best = max(best, length)
    return best


def longest_consecutive_sorted(arr: Sequence[int]) -> int:
    """Longest run of consecutive integers, scanning a sorted copy."""
    best = run = 0
    last = None
    for value in sorted(arr):
        if last is not None and value - 1 == last:
            run += 1
            last = value
        elif value != last:
            run = 1
            last = value
        best = max(best, run)
    return best


def longest_consecutive(arr: Sequence[int]) -> int:
    """Longest run of consecutive integers, growing runs only from their smallest member."""
    values = set(arr)
    best = 0
    for value in values:
        if value - 1 in values:
            continue
        length = 1
        while value + length in values:
            length += 1
        best = max(best, length)
    return best