# algobox

A small collection of classic algorithms over Python lists, strings, integers,
matrices and singly linked lists. Each one is a plain function, and nothing
beyond the standard library is needed.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Modules

- `algobox.linked_list` holds `ListNode`, `build_list` and `add_two_numbers`.
  `ListNode` is a dataclass with `val` and `next`. Iterating over it yields the
  values from that node to the end. `build_list` returns `None` for an empty
  input. `add_two_numbers` adds two numbers whose digits are stored least
  significant first.
- `algobox.numbers` holds `reverse_integer`, `is_palindrome_number`,
  `integer_sqrt`, `fibonacci`, `pascal_triangle`, `missing_number` and
  `single_number`. `reverse_integer` returns 0 when the reversed value falls
  outside the signed 32-bit range.
- `algobox.strings` holds `longest_unique_substring` and `is_alnum_palindrome`.
  The second function looks at ASCII letters and digits only, and ignores case.
- `algobox.searching` holds the binary-search family. These are
  `binary_search`, `search_insert`, `search_range`, `search_rotated`,
  `search_rotated_with_duplicates`, `find_min_rotated`, `find_peak`,
  `single_non_duplicate` and `min_eating_speed`. `search_range` returns a tuple
  `(first, last)`, or `(-1, -1)` if the target is absent.
- `algobox.sums` holds `two_sum`, `three_sum`, `four_sum`,
  `subarray_sum_count`, `max_subarray`, `max_product` and `max_profit`.
  `two_sum` returns a tuple of two indices, or `None` when no pair adds up to
  the target.
- `algobox.arrays` holds `remove_duplicates`, `next_permutation`,
  `sort_colors`, `merge_sorted`, `longest_consecutive`, `majority_element`,
  `majority_elements`, `rotate`, `max_consecutive_ones`, `is_sorted_rotated`
  and `rearrange_by_sign`. `majority_element` returns 0 when no value holds a
  majority. `sort_colors` leaves the list unchanged if it holds anything other
  than 0, 1 and 2.
- `algobox.matrix` holds `rotate_image`, `spiral_order`, `merge_intervals`,
  `set_zeroes`, `largest_rectangle_area` and `maximal_rectangle`.
  `maximal_rectangle` takes a grid of `"0"`/`"1"` characters.

## Functions that change their argument

Some functions change their argument in place and return `None`:

- `next_permutation`
- `sort_colors`
- `merge_sorted`
- `rotate`
- `rotate_image`
- `set_zeroes`

`remove_duplicates` also changes its argument in place. It compacts the list
and returns the number of distinct leading items.

## Errors

Invalid input raises `ValueError` in the following cases:

- an empty sequence passed to `find_min_rotated`, `find_peak`,
  `single_non_duplicate`, `max_subarray`, `max_product` or `is_sorted_rotated`
- a negative number passed to `integer_sqrt`
- a negative row count passed to `pascal_triangle`
- a non-square matrix passed to `rotate_image`
- unequal numbers of non-negative and negative values passed to
  `rearrange_by_sign`

## Examples

```python
from algobox.sums import two_sum, three_sum
from algobox.searching import search_rotated, min_eating_speed
from algobox.linked_list import build_list, add_two_numbers
from algobox.matrix import spiral_order

two_sum([2, 7, 11, 15], 9)           # (0, 1)
three_sum([-1, 0, 1, 2, -1, -4])     # [[-1, -1, 2], [-1, 0, 1]]
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)  # 4
min_eating_speed([3, 6, 7, 11], 8)   # 4

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
list(total)                          # [7, 0, 8]

spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])  # [1, 2, 3, 6, 9, 8, 7, 4, 5]
```

## What it does not do

This is a library of functions only. It has no command-line tool, and it does
not read input from files.

## Running the tests

```
pytest
```