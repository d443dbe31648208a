# dsakit

A small library of classic data-structure and algorithm routines, written as
plain Python functions and classes with no third-party dependencies.

## Installation

```
pip install dsakit
```

To run the tests:

```
pip install "dsakit[test]"
pytest
```

## Modules

- `dsakit.arrays`: `four_sum`, `celebrity`, `circular_tour` (takes a
  sequence of `PetrolPump`), `count_inversions`, `trap`, `trap_prefix`,
  `left_smaller`, `stock_span`, `subarray_sum`, `equilibrium_point`,
  `remove_duplicates`
- `dsakit.search`: `search_range`, `find_peak_element`,
  `find_median_sorted_arrays`
- `dsakit.strings`: `infix_to_postfix`, `longest_palindrome`,
  `number_of_special_chars`, `reverse_equation`, `number_of_subsequences`,
  `is_balanced`
- `dsakit.maths`: `is_prime`, `my_sqrt`, `pascal_triangle`, `subsets`
- `dsakit.structures`: `StackQueue` (a queue built on two stacks),
  `QueueStack` (a stack built on a queue), `TimeMap` (a key-value store that
  returns the latest value set at or before a given timestamp)
- `dsakit.trees`: `Node`, `count_nodes`, `is_bst`, `is_heap`, `inorder`,
  `level_order`, `search`
- `dsakit.linked`: `ListNode`, `from_iterable`, `is_palindrome`,
  `is_palindrome_inplace`

Some points of behaviour:

- `search_range` returns a tuple `(first, last)`, or `(-1, -1)` when the
  target is absent.
- `subarray_sum` returns 1-based inclusive bounds as a tuple, or `None`.
- `StackQueue.pop` and `QueueStack.pop` raise `IndexError` when empty.
- `find_peak_element` raises `ValueError` on an empty sequence, and
  `find_median_sorted_arrays` does so when both sequences are empty.
- `remove_duplicates` compacts the list in place and returns the count of
  distinct items.

## Examples

```python
from dsakit.strings import infix_to_postfix, is_balanced
from dsakit.search import search_range
from dsakit.structures import TimeMap

infix_to_postfix("a+b*(c^d-e)")       # "abcd^e-*+"
is_balanced("{([])}")                # True
search_range([5, 7, 7, 8, 8, 10], 8)  # (3, 4)

store = TimeMap()
store.set("foo", "bar", 1)
store.get("foo", 3)                   # "bar"
store.get("foo", 0)                   # ""
```

```python
from dsakit.trees import Node, is_bst, level_order

root = Node(2, Node(1), Node(3))
is_bst(root)        # True
level_order(root)   # [2, 1, 3]
```

```python
from dsakit.linked import from_iterable, is_palindrome

is_palindrome(from_iterable([1, 2, 1]))  # True
```

## What it does not do

The package is a library only: it has no command-line program, and it reads
no input files and stores nothing on disk.