# algokata

Compact, tested solutions to classic algorithm exercises. The exercises are grouped by the kind of data they work on. The package has no runtime dependencies and needs Python 3.10 or later.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algokata.arrays`

- `two_sum(nums, target)` returns the indices `[i, j]` of the first pair of numbers that adds up to `target`. It raises `ValueError` when no such pair exists.
- `max_area(height)` returns the largest area of water held between two of the lines.
- `three_sum(nums)` returns every distinct triple that sums to zero. Each triple is sorted, and the triples come in ascending order.
- `three_sum_closest(nums, target)` returns the sum of three numbers closest to `target`. It returns `0` when there are fewer than three numbers.

```python
from algokata.arrays import two_sum, max_area, three_sum, three_sum_closest

two_sum([2, 7, 11, 15], 9)               # [0, 1]
max_area([1, 8, 6, 2, 5, 4, 8, 3, 7])    # 49
three_sum([-1, 0, 1, 2, -1, -4])         # [[-1, -1, 2], [-1, 0, 1]]
three_sum_closest([-1, 2, 1, -4], 1)     # 2
```

### `algokata.strings`

- `length_of_longest_substring(s)` and `length_of_longest_substring_2(s)` both return the length of the longest substring that has no repeated characters.
  - The first one uses a sliding window over a set.
  - The second one remembers the last position of each character.
- `longest_palindrome(s)` returns the longest palindromic substring. When several have the same length, the earliest one is returned.
- `my_atoi(s)` parses a leading, optionally signed integer:
  - Surrounding whitespace is ignored.
  - Parsing stops at the first character that cannot continue the number.
  - The result is clamped to the 32-bit signed range.
  - If there are no digits, the result is `0`.
- `longest_common_prefix(strs)` returns the prefix shared by every string.
- `letter_combinations(digits)` returns every word the phone-keypad digits `2`–`9` can spell, sorted.
  - An empty string gives an empty list.
  - Any other character raises `ValueError`.

```python
from algokata.strings import (
    length_of_longest_substring,
    longest_palindrome,
    my_atoi,
    longest_common_prefix,
    letter_combinations,
)

length_of_longest_substring("abcabcbb")                # 3
longest_palindrome("babad")                            # "bab"
my_atoi(" -042")                                       # -42
longest_common_prefix(["flower", "flow", "flight"])    # "fl"
letter_combinations("23")   # ["ad", "ae", "af", "bd", "be", "bf", "cd", "ce", "cf"]
```

### `algokata.numbers`

- `reverse(x)` reverses the decimal digits of `x` and keeps its sign. It returns `0` if the result falls outside the 32-bit signed range.
- `is_palindrome(x)` tells whether `x` reads the same forwards and backwards. Negative numbers never do.
- `int_to_roman(num)` writes `num` as a Roman numeral. Zero and negative numbers give an empty string.
- `roman_to_int(s)` returns the value of a Roman numeral. A character that is not one of `IVXLCDM` raises `ValueError`.

```python
from algokata.numbers import reverse, is_palindrome, int_to_roman, roman_to_int

reverse(-321)             # -123
is_palindrome(121)        # True
int_to_roman(1994)        # "MCMXCIV"
roman_to_int("LVIII")     # 58
```

### `algokata.linked_list`

- `ListNode(val, next=None)` is a dataclass node of a singly linked list.
- `from_values(values)` builds a list from an iterable. Empty input gives `None`.
- `to_values(head)` returns the values of a list as a Python list.
- `add_two_numbers(l1, l2)` adds two numbers stored as digit lists, least significant digit first. It returns the sum as a new list of the same kind.

```python
from algokata.linked_list import from_values, to_values, add_two_numbers

to_values(add_two_numbers(from_values([2, 4, 3]), from_values([5, 6, 4])))
# [7, 0, 8]
```

## Scope

This is a library of plain functions. It has no command-line interface. Import the modules above and call their functions directly.