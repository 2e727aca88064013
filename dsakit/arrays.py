"""Array problems solved with XOR, two pointers, windows and monotonic stacks."""

from __future__ import annotations

import operator
from collections import deque
from functools import reduce
from typing import Iterable, Optional, Sequence


def single_unpaired(values: Iterable[int]) -> Optional[int]:
    """Return the value left over when all the others come in pairs.

    The values are combined with XOR. A result of zero means no unpaired
    value was found and gives ``None``.
    """
    result = reduce(operator.xor, values, 0)
    return result or None


def has_triplet_sum(values: Iterable[int], target: int) -> bool:
    """Tell whether three of the values add up to ``target``."""
    ordered = sorted(values)
    for position, first in enumerate(ordered):
        wanted = target - first
        low, high = position + 1, len(ordered) - 1
        while low < high:
            pair = ordered[low] + ordered[high]
            if pair == wanted:
                return True
            if pair < wanted:
                low += 1
            else:
                high -= 1
    return False


def max_consecutive_ones(values: Sequence[int], k: int) -> int:
    """Length of the longest run that holds at most ``k`` zeros."""
    if k < 0:
        raise ValueError("k must not be negative")
    left = 0
    zeros = 0
    best = 0
    for right, value in enumerate(values):
        if value == 0:
            zeros += 1
        while zeros > k:
            if values[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def previous_smaller(values: Sequence[int]) -> list[int]:
    """Index of the nearest strictly smaller value to the left, or -1."""
    stack: list[int] = []
    result: list[int] = []
    for index, value in enumerate(values):
        while stack and values[stack[-1]] >= value:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(index)
    return result


def next_smaller(values: Sequence[int]) -> list[int]:
    """Index of the nearest strictly smaller value to the right, or ``len(values)``."""
    stack: list[int] = []
    result: list[int] = []
    for index in reversed(range(len(values))):
        value = values[index]
        while stack and values[stack[-1]] >= value:
            stack.pop()
        result.append(stack[-1] if stack else len(values))
        stack.append(index)
    result.reverse()
    return result


def max_histogram_area(heights: Iterable[int]) -> int:
    """Largest rectangle in a histogram, found with a single stack pass."""
    bars = [*heights, 0]
    stack: list[int] = []
    best = 0
    for index, height in enumerate(bars):
        while stack and bars[stack[-1]] > height:
            top_height = bars[stack.pop()]
            width = index - stack[-1] - 1 if stack else index
            best = max(best, width * top_height)
        stack.append(index)
    return best


def max_histogram_area_by_bounds(heights: Sequence[int]) -> int:
    """Largest rectangle in a histogram, from the nearest smaller bars on each side."""
    following = next_smaller(heights)
    preceding = previous_smaller(heights)
    best = 0
    for height, right, left in zip(heights, following, preceding):
        best = max(best, (right - left - 1) * height)
    return best


def sliding_window_max(values: Sequence[int], k: int) -> list[int]:
    """Maxima of a window sliding over ``values``.

    The first result is the maximum of the first ``k`` values. Each later
    result, for position ``i``, is the maximum of ``values[i - k : i + 1]``:
    the index just before the ``k``-wide window is still held.
    """
    if not 1 <= k <= len(values):
        raise ValueError("window size must be between 1 and the number of values")
    window: deque[int] = deque()
    for index in range(k):
        while window and values[window[-1]] < values[index]:
            window.pop()
        window.append(index)
    result = [values[window[0]]]
    for index in range(k, len(values)):
        if window[0] < index - k:
            window.popleft()
        while window and values[window[-1]] < values[index]:
            window.pop()
        window.append(index)
        result.append(values[window[0]])
    return result


def stock_span(prices: Iterable[int]) -> list[int]:
    """For each day, the number of days up to it whose prices stay below its own."""
    stack: list[tuple[int, int]] = []
    spans: list[int] = []
    for price in prices:
        span = 1
        while stack and stack[-1][0] < price:
            span += stack.pop()[1]
        stack.append((price, span))
        spans.append(span)
    return spans


def trapped_water(heights: Sequence[int]) -> int:
    """Water held between bars; the first bar is never counted as a wall."""
    stack: list[int] = []
    total = 0
    for index in range(1, len(heights)):
        height = heights[index]
        while stack and heights[stack[-1]] < height:
            floor = heights[stack.pop()]
            if not stack:
                break
            left = stack[-1]
            level = min(heights[left], height)
            total += (level - floor) * (index - left - 1)
        stack.append(index)
    return total