"""Array problems: stacks, binary search, sweeps and sorting."""

from __future__ import annotations

import heapq
from collections import defaultdict
from collections.abc import Iterable, Sequence
from itertools import accumulate
from typing import Any


def surviving_asteroids(asteroids: Iterable[int]) -> list[int]:
    """Return the asteroids left after all collisions.

    Positive values move right, negative ones left; on collision the smaller
    one explodes, and both explode when equal in size.
    """
    stack: list[int] = []
    for asteroid in asteroids:
        alive = True
        while alive and stack and asteroid < 0 < stack[-1]:
            if -asteroid > stack[-1]:
                stack.pop()
                continue
            if -asteroid == stack[-1]:
                stack.pop()
            alive = False
        if alive:
            stack.append(asteroid)
    return stack


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the smallest eating speed that finishes all piles in h hours."""
    if not piles:
        raise ValueError("piles must not be empty")

    def can_finish(speed: int) -> bool:
        return sum(-(-pile // speed) for pile in piles) <= h

    low, high = 1, max(piles)
    while low < high:
        mid = (low + high) // 2
        if can_finish(mid):
            high = mid
        else:
            low = mid + 1
    return low


def largest_rectangle_area(heights: Iterable[int]) -> int:
    """Return the area of the largest rectangle within a histogram."""
    best = 0
    stack: list[tuple[int, int]] = []
    for i, height in enumerate([*heights, 0]):
        start = i
        while stack and stack[-1][1] >= height:
            start, top = stack.pop()
            best = max(best, top * (i - start))
        stack.append((start, height))
    return best


def _side_sum(peak_step: int, length: int) -> int:
    """Smallest sum of ``length`` values descending from ``peak_step`` by one, floor 1."""
    full = peak_step * (peak_step + 1) // 2
    if length <= peak_step:
        rest = peak_step - length
        return full - rest * (rest + 1) // 2
    return full + (length - peak_step)


def max_value(n: int, index: int, max_sum: int) -> int:
    """Return the largest value at ``index`` of n positive integers.

    Neighbours differ by at most one and the total stays within max_sum.
    Returns 0 when no such array exists.
    """
    left = index
    right = n - index - 1
    low, high = 1, max_sum
    answer = 0
    while low <= high:
        mid = (low + high) // 2
        step = mid - 1
        total = mid + _side_sum(step, left) + _side_sum(step, right)
        if total <= max_sum:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def remove_k_digits(num: str, k: int) -> str:
    """Remove k digits from num to leave the smallest possible number."""
    kept: list[str] = []
    for digit in num:
        while kept and k and kept[-1] > digit:
            kept.pop()
            k -= 1
        if kept or digit != "0":
            kept.append(digit)
    while kept and k > 0:
        kept.pop()
        k -= 1
    return "".join(kept) or "0"


def sum_of_subarray_minimums(arr: Sequence[int]) -> int:
    """Return the sum of the minimum of every contiguous subarray."""
    n = len(arr)
    left: list[int] = []
    stack: list[int] = []
    for i, value in enumerate(arr):
        while stack and arr[stack[-1]] > value:
            stack.pop()
        left.append(i - (stack[-1] if stack else -1))
        stack.append(i)
    right = [0] * n
    stack.clear()
    for i in reversed(range(n)):
        while stack and arr[stack[-1]] >= arr[i]:
            stack.pop()
        right[i] = (stack[-1] if stack else n) - i
        stack.append(i)
    return sum(value * l * r for value, l, r in zip(arr, left, right))


def trapped_water(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map holds."""
    if not height:
        return 0
    left = accumulate(height, max)
    right = list(accumulate(reversed(height), max))[::-1]
    return sum(min(l, r) - h for l, r, h in zip(left, right, height))


def max_overlap(starts: Iterable[int], ends: Iterable[int]) -> int:
    """Return the most intervals [start, end] that share a common point."""
    changes: defaultdict[int, int] = defaultdict(int)
    for start, end in zip(starts, ends, strict=True):
        changes[start] += 1
        changes[end + 1] -= 1
    best = 0
    for running in accumulate(changes[point] for point in sorted(changes)):
        best = max(best, running)
    return best


def kth_smallest(values: Iterable[Any], k: int) -> Any:
    """Return the k-th smallest value, counting from 1."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}")
    return heapq.nsmallest(k, items)[-1]


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
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


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted by a stable merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], lo: int, hi: int) -> int:
    pivot = items[lo]
    i, j = lo, hi
    while i < j:
        while i < hi and items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[lo], items[j] = items[j], items[lo]
    return j


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted by quick sort with the first element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo < hi:
            split = _partition(items, lo, hi)
            pending.append((lo, split - 1))
            pending.append((split + 1, hi))
    return items