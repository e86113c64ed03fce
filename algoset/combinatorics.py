"""Permutations and subsets of small sequences."""

from collections.abc import Iterator, Sequence


def permutations(nums: Sequence[int]) -> list[list[int]]:
    """Return every ordering of nums, picking earlier positions first."""

    def extend(prefix: list[int], remaining: list[int]) -> Iterator[list[int]]:
        if not remaining:
            yield prefix
            return
        for index, value in enumerate(remaining):
            yield from extend(prefix + [value], remaining[:index] + remaining[index + 1:])

    return list(extend([], list(nums)))


def unique_permutations(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct ordering of nums, which may hold repeated values."""
    arr = list(nums)

    def place(index: int) -> Iterator[list[int]]:
        if index == len(arr):
            yield list(arr)
            return
        tried: set = set()
        for i in range(index, len(arr)):
            if arr[i] in tried:
                continue
            arr[i], arr[index] = arr[index], arr[i]
            yield from place(index + 1)
            arr[i], arr[index] = arr[index], arr[i]
            tried.add(arr[i])

    return list(place(0))


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of nums, those without an element before those with it."""

    def choose(index: int, chosen: list[int]) -> Iterator[list[int]]:
        if index == len(nums):
            yield chosen
            return
        yield from choose(index + 1, chosen)
        yield from choose(index + 1, chosen + [nums[index]])

    return list(choose(0, []))