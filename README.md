# dsakit

A compact collection of classic data structures and algorithms, written to be
read as much as to be used. Each module is small and has no dependencies
outside the standard library.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.searching` | `binary_search`, `first_occurrence`, `last_occurrence`, `find_pivot`, `matrix_contains` |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sorted` |
| `dsakit.arrays` | `insert_at`, `reversed_copy`, `swap_alternate`, `reverse_string`, `row_sums`, `column_sums`, `build_matrix`, `format_matrix` |
| `dsakit.patterns` | square and triangle text patterns of stars, numbers and letters, e.g. `square_stars`, `triangle_counting`, `square_diagonal_letters` |
| `dsakit.conversions` | `celsius_to_fahrenheit`, `binary_digits`, `reversed_hex`, `encrypt_string`, `classify_char`, `calculate` |
| `dsakit.queues` | `LinkedCircularQueue`, `ArrayCircularQueue` |
| `dsakit.stacks` | `ArrayStack`, `LinkedStack` |
| `dsakit.errors` | `StructureError`, `EmptyError`, `FullError`, `InvalidPositionError` |

The sorting and array functions return new lists and leave their input
untouched. Positions taken by `insert_at` are 1-based; an out-of-range
position raises `InvalidPositionError`.

## Examples

```python
from dsakit.searching import binary_search, first_occurrence, last_occurrence
from dsakit.sorting import insertion_sort, merge_sorted
from dsakit.conversions import encrypt_string, binary_digits

binary_search([3, 4, 5, 6, 7, 8], 5)          # 2
first_occurrence([1, 4, 4, 4, 9], 4)           # 1
last_occurrence([1, 4, 4, 4, 9], 4)            # 3
insertion_sort([5, 2, 9, 1])                   # [1, 2, 5, 9]
merge_sorted([1, 3, 5], [2, 4, 6])             # [1, 2, 3, 4, 5, 6]
binary_digits(5)                               # 101
encrypt_string("abc")                          # "1c1b1a"
```

```python
from dsakit.patterns import triangle_stars

print("\n".join(triangle_stars(3)))
# *
# **
# ***
```

The containers behave like ordinary Python collections: they can be iterated,
measured with `len()`, and report misuse by raising exceptions from
`dsakit.errors` (`EmptyError` on underflow, `FullError` on overflow).

```python
from dsakit.stacks import ArrayStack
from dsakit.queues import ArrayCircularQueue
from dsakit.errors import EmptyError, FullError

stack = ArrayStack()
stack.push(10)
stack.push(20)
stack.peek()      # 20
stack.pop()       # 20
list(stack)       # [10]  (top to bottom)

queue = ArrayCircularQueue(2)
queue.enqueue(1)
queue.enqueue(2)
queue.is_full()   # True
queue.dequeue()   # 1

try:
    ArrayStack().pop()
except EmptyError:
    ...
```

## Command-line tools

```
dsakit-matrix [ROWS COLS VALUES...]      # read a matrix and print it back
dsakit-patterns PATTERN N                # print a named pattern of size N
dsakit-queue [--linked] [--size N]       # circular queue menu
dsakit-stack [--linked] [--capacity N]   # stack menu
```

`dsakit-matrix` takes its dimensions and values from the command line, or asks
for them one by one when given none. `dsakit-patterns` accepts any pattern
function name from `dsakit.patterns`, such as `square_stars` or
`triangle_descending`. The queue and stack tools show a numbered menu and read
choices from standard input until the exit option or end of input; the queue
uses a fixed-size array unless `--linked` is given, and asks for its size when
`--size` is omitted.

## What the package does not do

There are no general-purpose linked-list containers (singly, doubly or
circular lists with positional insert and delete) and no menu tools for them.
Linked nodes appear only inside `LinkedCircularQueue` and `LinkedStack`.
There is no heap or priority queue.