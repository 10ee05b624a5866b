"""Array puzzles: pair and triple sums, and the largest water container."""

from __future__ import annotations

import math
from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of the first pair of numbers adding up to ``target``.

    Raises ValueError when no such pair exists.
    """
    seen: dict[int, int] = {}
    for idx, value in enumerate(nums):
        previous = seen.get(target - value)
        if previous is not None:
            return [previous, idx]
        seen[value] = idx
    raise ValueError(f"no two numbers add up to {target}")


def max_area(height: Sequence[int]) -> int:
    """Return the largest area of water held between two of the given lines."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        h1, h2 = height[left], height[right]
        best = max(best, min(h1, h2) * (right - left))
        if h1 < h2:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triple of numbers summing to zero, in sorted order."""
    values = sorted(nums)
    count = len(values)
    result: list[list[int]] = []
    i = 0
    while i < count:
        left, right = i + 1, count - 1
        while left < right:
            total = values[i] + values[left] + values[right]
            if total == 0:
                result.append([values[i], values[left], values[right]])
            if total > 0:
                while right > left and values[right] == values[right - 1]:
                    right -= 1
                right -= 1
            else:
                while left < right and values[left] == values[left + 1]:
                    left += 1
                left += 1
        while i < count - 1 and values[i] == values[i + 1]:
            i += 1
        i += 1
    return result


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three numbers closest to ``target``; 0 if there are fewer than three."""
    values = sorted(nums)
    closest = 0
    distance = math.inf
    for idx, value in enumerate(values):
        left, right = idx + 1, len(values) - 1
        while left < right:
            total = value + values[left] + values[right]
            if total == target:
                return target
            current = abs(target - total)
            if current < distance:
                distance = current
                closest = total
            if total > target:
                right -= 1
            else:
                left += 1
    return closest