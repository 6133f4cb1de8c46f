"""Short assessment problems: ration distribution and binary expression evaluation."""

from itertools import accumulate
from typing import Sequence

_OPERATIONS = {
    "A": lambda left, right: left & right,
    "B": lambda left, right: left | right,
}


def houses_needed(r: int, unit: int, arr: Sequence[int]) -> int:
    """Return how many leading houses' food covers r rats eating unit each.

    If the houses together fall short, the result is one more than their count.
    """
    total = r * unit
    for count, food in enumerate(accumulate(arr), start=1):
        if food >= total:
            return count
    return len(arr) + 1


def _bit(char: str) -> int:
    if char not in "01" or len(char) != 1:
        raise ValueError(f"expected a binary digit, got {char!r}")
    return int(char)


def operations_binary_string(text: str) -> int:
    """Evaluate digits joined by A (and), B (or) and any other letter (xor), left to right."""
    if not text:
        raise ValueError("expression is empty")
    if len(text) % 2 == 0:
        raise ValueError("expression must alternate digits and operators, ending on a digit")
    result = _bit(text[0])
    for operator, digit in zip(text[1::2], text[2::2]):
        operand = _bit(digit)
        apply = _OPERATIONS.get(operator, lambda left, right: left ^ right)
        result = apply(result, operand)
    return result