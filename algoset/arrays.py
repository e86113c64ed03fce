"""Array puzzles: permutations of indices, sign interleaving, sorting, searching and more."""

from bisect import bisect_left
from collections import Counter
from collections.abc import Sequence
from functools import reduce
from heapq import merge
from itertools import combinations
from operator import xor

_MOD = 10**9 + 7


def build_array(nums: Sequence[int]) -> list[int]:
    """Return ans with ans[i] == nums[nums[i]] for every index i."""
    size = len(nums)
    for value in nums:
        if not 0 <= value < size:
            raise ValueError(f"value {value} is not an index of a list of length {size}")
    return [nums[value] for value in nums]


def concatenate(nums: Sequence[int]) -> list[int]:
    """Return the list followed by a second copy of itself."""
    return [*nums, *nums]


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return True if any value occurs more than once."""
    return len(set(nums)) != len(nums)


def rearrange_by_sign(nums: Sequence[int]) -> list[int]:
    """Place positive values at even and the others at odd indices, keeping their order."""
    positives = [x for x in nums if x > 0]
    others = [x for x in nums if x <= 0]
    result = [0] * len(nums)
    even_slots = len(range(0, len(nums), 2))
    odd_slots = len(range(1, len(nums), 2))
    if len(positives) != even_slots or len(others) != odd_slots:
        raise ValueError(
            f"{len(positives)} positive and {len(others)} other values cannot alternate"
        )
    result[0::2] = positives
    result[1::2] = others
    return result


def find_matrix(nums: Sequence[int]) -> list[list[int]]:
    """Split values into the fewest rows so that no row repeats a value."""
    rows: list[list[int]] = []
    seen: Counter = Counter()
    for value in nums:
        level = seen[value]
        if level == len(rows):
            rows.append([])
        rows[level].append(value)
        seen[value] += 1
    return rows


def longest_increasing_subsequence(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def largest_perimeter(nums: Sequence[int]) -> int:
    """Return the largest perimeter of a polygon from the given sides, or -1 if none exists."""
    best = -1
    total = 0
    for side in sorted(nums):
        if side < total:
            best = side + total
        total += side
    return best


def sum_subarray_mins(nums: Sequence[int]) -> int:
    """Return the sum of the minimum of every contiguous subarray, modulo 10**9 + 7."""
    length = len(nums)
    left = [-1] * length
    right = [length] * length

    stack: list[int] = []
    for i, value in enumerate(nums):
        while stack and nums[stack[-1]] >= value:
            stack.pop()
        if stack:
            left[i] = stack[-1]
        stack.append(i)

    stack = []
    for i in reversed(range(length)):
        while stack and nums[stack[-1]] > nums[i]:
            stack.pop()
        if stack:
            right[i] = stack[-1]
        stack.append(i)

    total = 0
    for i, value in enumerate(nums):
        total = (total + (i - left[i]) * (right[i] - i) * value) % _MOD
    return total


def merge_sort(nums: Sequence[int]) -> list[int]:
    """Return a new list holding the values in ascending order, sorted by merging."""
    if len(nums) <= 1:
        return list(nums)
    middle = len(nums) // 2
    return list(merge(merge_sort(nums[:middle]), merge_sort(nums[middle:])))


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the first index pair [i, j] with i < j whose values add up to target, or []."""
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return [i, j]
    return []


def single_number(nums: Sequence[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def majority_element(nums: Sequence[int]) -> int:
    """Return the majority value using the Boyer-Moore voting scheme."""
    if not nums:
        raise ValueError("majority of an empty sequence")
    candidate = nums[0]
    count = 0
    for value in nums:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so its first k entries are unique; return k."""
    kept = [value for index, value in enumerate(nums) if index == 0 or value != nums[index - 1]]
    nums[: len(kept)] = kept
    return len(kept)


def remove_element(nums: list[int], val: int) -> int:
    """Move every entry not equal to val to the front, in order; return how many there are."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of 0..len(nums) that is absent from nums."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def search(nums: Sequence[int], target: int) -> int:
    """Return the index of target in nums, or -1 if it is absent."""
    try:
        return nums.index(target)
    except ValueError:
        return -1