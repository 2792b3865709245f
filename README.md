# dsakit

A small library of classic data structures and algorithms in plain Python,
with no runtime dependencies. Every algorithm is a function or class you
import and call; mutating algorithms work in place on any mutable sequence
(usually a `list`) and return `None` unless stated otherwise.

## Installation

```
pip install dsakit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `find_duplicate`, `max_subarray`, `move_zeroes`, `reverse_in_place`, `rotate`, `two_sum`, `remove_duplicates` |
| `dsakit.strings` | `is_anagram`, `build_prefix`, `longest_palindrome`, `length_of_longest_substring`, `reverse_string`, `is_palindrome` |
| `dsakit.maths` | `to_base`, `fast_exp`, `gcd`, `lcm`, `is_prime`, `is_power_of_two` |
| `dsakit.bits` | `bit_difference`, `is_kth_bit_set`, `count_set_bits`, `xor_swap` |
| `dsakit.sorting` | `bubble_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `radix_sort` |
| `dsakit.searching` | `binary_search`, `lower_bound`, `upper_bound`, `search_matrix`, `floor_sqrt` |
| `dsakit.sliding_window` | `max_sum_window`, `sliding_maximum`, `min_subarray_len` |
| `dsakit.stacks` | `MinStack`, `is_valid_parentheses` |
| `dsakit.queues` | `CircularQueue`, `StackQueue`, `LinkedDeque` |
| `dsakit.linked_list` | `Node`, `from_iterable`, `iter_values`, `format_list`, `has_cycle`, `get_intersection`, `merge_sorted`, `remove_nth_from_end`, `reverse` |
| `dsakit.recursion` | `factorial`, `tail_factorial`, `fibonacci`, `permutations` |

## Arrays, strings and maths

```python
from dsakit.arrays import max_subarray, move_zeroes, remove_duplicates, rotate, two_sum
from dsakit.strings import build_prefix, longest_palindrome, is_palindrome
from dsakit.maths import to_base, fast_exp, gcd, lcm

max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
two_sum([3, 11, 6, 15], 9)                      # (0, 2); None when no pair exists

nums = [0, 1, 0, 3, 12]
move_zeroes(nums)                               # nums == [1, 3, 12, 0, 0]

nums = [1, 2, 3, 4, 5, 6, 7]
rotate(nums, 3)                                 # nums == [5, 6, 7, 1, 2, 3, 4]

nums = [1, 1, 2, 2, 3]
remove_duplicates(nums)                         # 3; nums[:3] == [1, 2, 3]

build_prefix("ababcab")                         # [0, 0, 1, 2, 0, 1, 2]
longest_palindrome("babad")                     # 'bab'
is_palindrome("A man, a plan, a canal: Panama") # True

to_base(255, 16)                                # 'FF'
fast_exp(3, 13)                                 # 1594323
gcd(36, 60), lcm(36, 60)                        # (12, 180)
```

Notes on edge cases:

- `find_duplicate` and `max_subarray` raise `ValueError` on an empty sequence.
  `find_duplicate` uses the values as indices, so each value must be a valid index.
- `to_base` accepts bases 2 to 16 and non-negative numbers, otherwise `ValueError`.
- `fast_exp` raises `ValueError` for a negative exponent; `lcm` returns 0 if
  either argument is 0.

## Bits

```python
from dsakit.bits import bit_difference, count_set_bits, is_kth_bit_set, xor_swap

count_set_bits(29)       # 4; negative numbers are counted as 32-bit two's complement
bit_difference(29, 15)   # 2
is_kth_bit_set(10, 1)    # True; a negative k raises ValueError
xor_swap(5, 7)           # (7, 5)
```

## Sorting and searching

```python
from dsakit.sorting import heap_sort, merge_sort, quick_sort, radix_sort
from dsakit.searching import binary_search, lower_bound, upper_bound, search_matrix, floor_sqrt

arr = [170, 45, 75, 90, 802, 24, 2, 66]
radix_sort(arr)          # arr == [2, 24, 45, 66, 75, 90, 170, 802]

arr = [0, 1, 2, 2, 2, 3, 4, 5]
lower_bound(arr, 2), upper_bound(arr, 2)        # (2, 5)
binary_search([1, 3, 5, 7, 9, 11], 7)           # 3; None when absent

search_matrix([[1, 4, 7], [8, 10, 12], [13, 14, 17]], 10)  # True
floor_sqrt(17)                                  # 4
```

`merge_sort` is stable; `radix_sort` only takes non-negative integers and raises
`ValueError` otherwise; `floor_sqrt` raises `ValueError` for a negative number.

## Sliding windows

```python
from dsakit.sliding_window import max_sum_window, sliding_maximum, min_subarray_len

max_sum_window([2, 1, 5, 1, 4, 3, 2], 3)        # 10
sliding_maximum([1, 3, -1, -3, 5, 3, 6, 7], 3)  # [3, 3, 5, 5, 6, 7]
min_subarray_len(7, [2, 3, 1, 2, 4, 1])         # 2; 0 when no run reaches the target
```

`max_sum_window` requires `1 <= k <= len(arr)`, and `sliding_maximum` requires a
positive `k`; both raise `ValueError` otherwise.

## Stacks and queues

```python
from dsakit.stacks import MinStack, is_valid_parentheses
from dsakit.queues import CircularQueue, StackQueue, LinkedDeque

stack = MinStack()
for value in (3, 5, 2):
    stack.push(value)
stack.get_min()                      # 2
stack.pop()                          # 2
stack.top(), stack.get_min()         # (5, 3)

is_valid_parentheses("{[()]}")       # True

queue = CircularQueue(5)
queue.enqueue(1)
queue.enqueue(2)
queue.peek()                         # 1
queue.dequeue()                      # 1

sq = StackQueue()
sq.push(10)
sq.push(20)
sq.pop(), sq.peek()                  # (10, 20)

dq = LinkedDeque()
dq.push_front(10)
dq.push_back(20)
dq.peek_front(), dq.peek_back()      # (10, 20)
list(dq)                             # [10, 20]
```

All of these support `len()`. Popping or peeking an empty structure raises
`IndexError`; enqueueing into a full `CircularQueue` raises `OverflowError`.
`is_valid_parentheses` treats any character that is not a closing bracket as an
opener, so the string should contain brackets only.

## Linked lists

```python
from dsakit.linked_list import (
    from_iterable, format_list, iter_values, merge_sorted,
    remove_nth_from_end, reverse, has_cycle,
)

merged = merge_sorted(from_iterable([1, 3]), from_iterable([2, 4]))
format_list(merged)                                  # '1 2 3 4'
format_list(reverse(from_iterable([1, 2, 3])))       # '3 2 1'
list(iter_values(remove_nth_from_end(from_iterable([1, 2, 3]), 2)))  # [1, 3]
has_cycle(from_iterable([1, 2, 3]))                  # False
```

`Node` objects compare by identity, which is what `get_intersection` uses to
find the first node two lists share. `remove_nth_from_end` raises `ValueError`
when `n` is outside `1..len(list)`.

## Recursion

```python
from dsakit.recursion import factorial, tail_factorial, fibonacci, permutations

factorial(5)                         # 120
tail_factorial(5)                    # 120
fibonacci(10)                        # 55
permutations([1, 2, 3])              # all six orderings, as lists
```

The factorial functions raise `ValueError` for negative input.

## Scope

dsakit is a library only: it has no command-line tool, and nothing is printed
or read from files.