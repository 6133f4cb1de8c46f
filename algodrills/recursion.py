"""Recursive drills: counting, sums, reversal, subsequences and combination search."""

from math import prod
from typing import Iterator, Sequence


def factorial(n: int) -> int:
    """Return n!, treating any n below 1 as 1."""
    return prod(range(1, n + 1))


def count_up(n: int) -> list[int]:
    """Return 1..n in ascending order, built while unwinding the recursion."""
    if n < 1:
        return []
    return count_up(n - 1) + [n]


def count_down(n: int) -> list[int]:
    """Return n..1 in descending order."""
    if n < 1:
        return []
    return [n] + count_down(n - 1)


def count_from_zero(n: int) -> list[int]:
    """Return 0..n-1 in ascending order."""
    def step(current: int) -> list[int]:
        if current >= n:
            return []
        return [current] + step(current + 1)

    return step(0)


def greeting_lines(name: str, n: int) -> list[str]:
    """Return name followed by each number 1..n, one string per line."""
    if n < 1:
        raise ValueError("n must be at least 1")

    def step(i: int) -> list[str]:
        line = f"{name}{i}"
        if i == n:
            return [line]
        return [line] + step(i + 1)

    return step(1)


def natural_sum(n: int) -> int:
    """Return 1 + 2 + ... + n, or 0 when n is below 1."""
    if n < 1:
        return 0
    return n + natural_sum(n - 1)


def natural_sum_accumulated(n: int) -> int:
    """Return 1 + 2 + ... + n, carrying the running total down the recursion."""
    def step(remaining: int, total: int) -> int:
        if remaining < 1:
            return total
        return step(remaining - 1, total + remaining)

    return step(n, 0)


def reverse(arr: Sequence[int]) -> list[int]:
    """Return a reversed copy, swapping mirrored positions recursively."""
    result = list(arr)
    size = len(result)

    def step(i: int) -> None:
        if i >= size // 2:
            return
        result[i], result[size - i - 1] = result[size - i - 1], result[i]
        step(i + 1)

    step(0)
    return result


def subsequences(arr: Sequence[int]) -> Iterator[list[int]]:
    """Yield every subsequence, choosing to take each element before skipping it."""
    def step(index: int, chosen: list[int]) -> Iterator[list[int]]:
        if index == len(arr):
            yield list(chosen)
            return
        chosen.append(arr[index])
        yield from step(index + 1, chosen)
        chosen.pop()
        yield from step(index + 1, chosen)

    return step(0, [])


def subsequences_with_sum(arr: Sequence[int], k: int) -> Iterator[list[int]]:
    """Yield, in take-before-skip order, the subsequences whose elements sum to k."""
    def step(index: int, chosen: list[int], total: int) -> Iterator[list[int]]:
        if index == len(arr):
            if total == k:
                yield list(chosen)
            return
        chosen.append(arr[index])
        yield from step(index + 1, chosen, total + arr[index])
        chosen.pop()
        yield from step(index + 1, chosen, total)

    return step(0, [], 0)


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every combination of candidates, reusable without limit, summing to target."""
    found: list[list[int]] = []
    chosen: list[int] = []

    def step(index: int, remaining: int) -> None:
        if index == len(candidates):
            if remaining == 0:
                found.append(list(chosen))
            return
        if candidates[index] <= remaining:
            chosen.append(candidates[index])
            step(index, remaining - candidates[index])
            chosen.pop()
        step(index + 1, remaining)

    step(0, target)
    return found


def subset_sums(arr: Sequence[int]) -> list[int]:
    """Return the sums of all subsets, sorted ascending."""
    sums: list[int] = []

    def step(index: int, total: int) -> None:
        if index == len(arr):
            sums.append(total)
            return
        step(index + 1, total + arr[index])
        step(index + 1, total)

    step(0, 0)
    return sorted(sums)