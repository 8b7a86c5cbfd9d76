"""Exercises on lists of integers and strings."""

from __future__ import annotations

from itertools import pairwise

__all__ = [
    "missing_number",
    "find_max_consecutive_ones",
    "search_range",
    "search_insert",
    "rotate",
    "plus_one",
    "remove_element",
    "set_zeroes",
    "is_rotated_sorted",
    "sort_colors",
    "final_value_after_operations",
]

_INCREMENTS = frozenset({"X++", "++X"})
_DECREMENTS = frozenset({"--X", "X--"})


def missing_number(nums: list[int]) -> int:
    """Return the value of 0..len(nums) that is absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def find_max_consecutive_ones(nums: list[int]) -> int:
    """Return the longest run of 1s; only a 0 breaks a run."""
    count = 0
    best = 0
    for value in nums:
        if value == 1:
            count += 1
            best = max(best, count)
        elif value == 0:
            count = 0
    return best


def search_range(nums: list[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` in a sorted list.

    A position before the first match resets both to -1; a single match
    leaves the second index at whatever it held before.
    """
    answer = [0, 0]
    found = False
    for index, value in enumerate(nums):
        if value == target and not found:
            answer[0] = index
            found = True
        elif value == target:
            answer[1] = index
        elif not found:
            answer = [-1, -1]
    return answer[0], answer[1]


def search_insert(nums: list[int], target: int) -> int:
    """Return the index of ``target`` in a sorted list, or where it belongs."""
    for index, value in enumerate(nums):
        if value >= target:
            return index
        if target > nums[-1]:
            return len(nums)
    return len(nums)


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places, in place."""
    if not nums:
        return
    k %= len(nums)
    if k == 0:
        return
    nums[:] = nums[-k:] + nums[:-k]


def plus_one(digits: list[int]) -> list[int]:
    """Return the decimal digits of the number ``digits`` plus one."""
    result = list(digits)
    if not result:
        return result
    result[-1] += 1
    for index in range(len(result) - 1, -1, -1):
        if result[index] == 10:
            result[index] = 0
            if index:
                result[index - 1] += 1
            else:
                result.append(0)
                result[0] = 1
    return result


def remove_element(nums: list[int], val: int) -> int:
    """Return how many elements of ``nums`` differ from ``val``."""
    return sum(1 for value in nums if value != val)


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {r for r, row in enumerate(matrix) if 0 in row}
    zero_cols = {c for row in matrix for c, value in enumerate(row) if value == 0}
    for r, row in enumerate(matrix):
        for c in range(len(row)):
            if r in zero_rows or c in zero_cols:
                row[c] = 0


def is_rotated_sorted(nums: list[int]) -> bool:
    """Tell whether ``nums`` is a non-decreasing list rotated some places."""
    pairs = list(pairwise(nums))
    for index, (left, right) in enumerate(pairs):
        if left > right:
            if nums[-1] > nums[0]:
                return False
            return not any(
                a > b or a > nums[0] for a, b in pairs[index + 1:]
            )
    return True


def sort_colors(nums: list[int]) -> None:
    """Sort ``nums`` ascending, in place."""
    nums.sort()


def final_value_after_operations(operations: list[str]) -> int:
    """Apply X++/++X and X--/--X to a counter starting at zero."""
    value = 0
    for operation in operations:
        if operation in _INCREMENTS:
            value += 1
        elif operation in _DECREMENTS:
            value -= 1
    return value