# algoset

A small library of classic algorithm routines, grouped by the kind of data
they work on. It has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install algoset
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "algoset[test]"
pytest
```

## Modules

### `algoset.integers`

- `fibonacci(n)`: the n-th Fibonacci number; values of `n` below 2 are
  returned unchanged.
- `is_palindrome_number(x)`: whether the decimal digits of `x` read the same
  both ways; negative numbers are never palindromes.

### `algoset.strings`

- `defang_ip_address(address)`: replaces every `.` with `[.]`.
- `roman_to_int(s)`: converts a Roman numeral, honouring subtractive pairs.
  Raises `ValueError` for an empty string or an unknown character.
- `is_pangram(sentence)`: whether every lowercase English letter appears.
- `sort_sentence(s)`: restores a shuffled sentence whose words end in their
  1-based position digit (`"is2 sentence4 This1 a3"` becomes
  `"This is a sentence"`). Raises `ValueError` for a malformed word.
- `sort_vowels(s)`: sorts the vowels by character code, leaving every other
  character in place.
- `longest_unique_substring_length(s)`: length of the longest substring
  without a repeated character.
- `longest_palindrome_length(s)`: length of the longest palindrome that can
  be built from the characters of `s`.
- `add_strings(num1, num2)`: adds two non-negative decimal digit strings.
  Raises `ValueError` if either holds a non-digit.
- `to_lower_case(s)`: lower-cases ASCII capitals only.

### `algoset.linked_list`

- `ListNode(val=0, next=None)`: a singly linked list node. Iterating over a
  node yields the values from it to the end of the list.
- `from_values(values)` and `to_values(head)`: convert between Python
  iterables and linked lists (an empty list is `None`).
- `remove_nth_from_end(head, n)`: unlinks the n-th node from the end and
  returns the new head; raises `ValueError` if `n` is out of range.
- `reverse_list(head)`: reverses the list in place.
- `rotate_right(head, k)`: rotates the list `k` places to the right; raises
  `ValueError` for a negative `k` on a list of two or more nodes.
- `middle_node(head)`: the middle node, the second of the two for even
  lengths.

### `algoset.arrays`

- `build_array(nums)`: `ans[i] == nums[nums[i]]`; raises `ValueError` if a
  value is not a valid index.
- `concatenate(nums)`: the list followed by a copy of itself.
- `contains_duplicate(nums)`: whether any value occurs twice.
- `rearrange_by_sign(nums)`: positives at even indices, the rest at odd
  indices, keeping their order; raises `ValueError` if they cannot alternate.
- `find_matrix(nums)`: splits values into the fewest rows with no repeated
  value in a row.
- `longest_increasing_subsequence(nums)`: length of the longest strictly
  increasing subsequence.
- `largest_perimeter(nums)`: largest polygon perimeter from the given sides,
  or `-1`.
- `sum_subarray_mins(nums)`: sum of the minimum of every contiguous
  subarray, modulo `10**9 + 7`.
- `merge_sort(nums)`: a new sorted list.
- `two_sum(nums, target)`: the first index pair `[i, j]` adding up to
  `target`, or `[]`.
- `single_number(nums)`: the value appearing once when all others appear
  twice.
- `majority_element(nums)`: the majority value by Boyer-Moore voting; raises
  `ValueError` for an empty sequence.
- `remove_duplicates(nums)` and `remove_element(nums, val)`: compact a list
  in place and return how many entries are kept at the front.
- `missing_number(nums)`: the one number of `0..len(nums)` that is absent.
- `search(nums, target)`: index of `target`, or `-1`.

### `algoset.combinatorics`

- `permutations(nums)`: every ordering of `nums`.
- `unique_permutations(nums)`: every distinct ordering when values repeat.
- `subsets(nums)`: every subset, those without an element before those with
  it.

### `algoset.grid`

- `cherry_pickup(grid)`: the most cherries two robots starting in the top
  corners can collect moving down one row per step; a shared cell counts
  once. Raises `ValueError` for an empty grid.

## Examples

```python
from algoset.strings import roman_to_int, add_strings
from algoset.arrays import two_sum, merge_sort
from algoset.linked_list import from_values, to_values, reverse_list
from algoset.combinatorics import subsets

roman_to_int("MCMXCIV")          # 1994
add_strings("456", "77")         # "533"
two_sum([2, 7, 11, 15], 9)       # [0, 1]
merge_sort([5, 2, 3, 1])         # [1, 2, 3, 5]

head = from_values([1, 2, 3])
to_values(reverse_list(head))    # [3, 2, 1]

subsets([1, 2])                  # [[], [2], [1], [1, 2]]
list(from_values([4, 5, 6]))     # [4, 5, 6]
```

## What it does not do

algoset is a library only: it installs no command-line program, and its
functions work on in-memory values without reading or writing files.