"""Algorithms over lists of integers."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import combinations, pairwise
from operator import xor


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of the first element not less than ``target``.

    If every element is smaller, ``len(nums)`` is returned.
    """
    return next((i for i, value in enumerate(nums) if value >= target), len(nums))


def plus_one(digits: Iterable[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits, most significant first."""
    head = list(digits)
    carried = 0
    while head and head[-1] >= 9:
        head.pop()
        carried += 1
    if head:
        head[-1] += 1
    else:
        head = [1]
    return head + [0] * carried


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` items of ``nums2`` into ``nums1`` in place.

    ``nums1`` holds ``m`` sorted items followed by room for ``n`` more.
    """
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged items")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n items")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    row: list[int] = []
    for _ in range(num_rows):
        row = [1] + [a + b for a, b in pairwise(row)] + ([1] if row else [])
        triangle.append(row)
    return triangle


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one purchase followed by one sale."""
    it = iter(prices)
    try:
        lowest = next(it)
    except StopIteration:
        raise ValueError("prices must not be empty") from None
    profit = 0
    for price in it:
        lowest = min(lowest, price)
        profit = max(profit, price - lowest)
    return profit


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def majority_element(nums: Iterable[int]) -> int:
    """Return the element that fills more than half of ``nums``."""
    ordered = sorted(nums)
    if not ordered:
        raise ValueError("nums must not be empty")
    return ordered[len(ordered) // 2]


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Tell whether any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Tell whether two equal values stand at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for i, value in enumerate(nums):
        if value in last_seen and i - last_seen[value] <= k:
            return True
        last_seen[value] = i
    return False


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``nums``, or -1 if absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if target > nums[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the first pair of indices whose values add up to ``target``.

    When no such pair exists, a copy of ``nums`` is returned.
    """
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return [i, j]
    return list(nums)