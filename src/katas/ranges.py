"""Compress a sorted list of integers into range notation."""

from __future__ import annotations

from collections.abc import Sequence

# Runs shorter than this are written out value by value.
MIN_RANGE_LENGTH = 3


def extract_ranges(nums: Sequence[int]) -> str:
    """Return *nums* as comma-separated values and ``start-end`` ranges.

    Only runs of three or more consecutive integers become ranges; a run of
    two stays as two separate values::

        extract_ranges([0, 1, 2, 5, 7, 8, 9]) == "0-2,5,7-9"
        extract_ranges([1, 2, 4, 5]) == "1,2,4,5"
    """
    items: list[str] = []
    start = 0
    while start < len(nums):
        end = start
        while end + 1 < len(nums) and nums[end + 1] == nums[end] + 1:
            end += 1
        if end - start + 1 >= MIN_RANGE_LENGTH:
            items.append(f"{nums[start]}-{nums[end]}")
        else:
            items.extend(str(n) for n in nums[start : end + 1])
        start = end + 1
    return ",".join(items)
