import itertools
from collections import Counter

from hypothesis import given
from hypothesis import strategies as st

from algoset.combinatorics import permutations, subsets, unique_permutations

small_lists = st.lists(st.integers(-10, 10), max_size=6)


@given(st.lists(st.integers(-10, 10), unique=True, max_size=6))
def test_permutations_match_itertools(nums):
    assert permutations(nums) == [list(p) for p in itertools.permutations(nums)]


def test_permutations_of_empty():
    assert permutations([]) == [[]]


@given(small_lists)
def test_unique_permutations_are_all_distinct_orderings(nums):
    result = unique_permutations(nums)
    as_tuples = [tuple(p) for p in result]
    assert len(as_tuples) == len(set(as_tuples))
    assert set(as_tuples) == set(itertools.permutations(nums))
    assert all(Counter(p) == Counter(nums) for p in result)


def test_unique_permutations_order():
    assert unique_permutations([1, 1, 2]) == [[1, 1, 2], [1, 2, 1], [2, 1, 1]]


@given(st.lists(st.integers(-10, 10), unique=True, max_size=8))
def test_subsets_cover_powerset(nums):
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    keys = {frozenset(s) for s in result}
    assert len(keys) == len(result)
    assert result[0] == []
    assert result[-1] == nums


def test_subsets_order():
    assert subsets([1, 2, 3]) == [[], [3], [2], [2, 3], [1], [1, 3], [1, 2], [1, 2, 3]]


@given(st.lists(st.integers(-10, 10), unique=True, max_size=8))
def test_subsets_keep_input_order(nums):
    position = {value: index for index, value in enumerate(nums)}
    for subset in subsets(nums):
        indices = [position[x] for x in subset]
        assert indices == sorted(indices)