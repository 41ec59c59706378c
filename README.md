# dsalgo

A small library of classic data structures and algorithms in plain Python,
with no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsalgo.sorting`

`bubble_sort`, `counting_sort`, `heap_sort`, `insertion_sort`, `merge_sort`,
`quick_sort`, `radix_sort` and `selection_sort` take any iterable and return a
new sorted list; the input is left untouched.

- `bubble_sort_steps(items)` yields a copy of the list after every swap.
- `counting_sort(items, max_value)` sorts integers in `0..max_value` and raises
  `ValueError` for anything outside that range.
- `radix_sort(items)` sorts non-negative integers and raises `ValueError` for
  negative ones.

### `dsalgo.searching`

- `linear_search(items, target)` returns every index where `target` occurs.
- `binary_search(items, target)` searches a sorted sequence and returns an
  index or `None`.
- `sentinel_search(items, target)` returns the first index or `None`.

### `dsalgo.text`

- `left_rotate(items, d)` returns the items rotated left by `d` places.
- `is_duck_number(num)` is true when a string or int has a zero digit that is
  not a leading zero.
- `round_to_ten(n)` rounds to the nearer multiple of ten, ties going to the
  lower one (`4722` gives `4720`).
- `is_pangram(text)` checks for all 26 English letters, ignoring case.
- `replace_word(text, old, new)` replaces every occurrence of `old`; an empty
  `old` raises `ValueError`.
- `has_repeated_letter(word)` checks a lowercase word for a repeated letter and
  raises `ValueError` on any other character.
- `reverse_concat(tokens)` joins the tokens last to first.

### `dsalgo.linked_lists`

`SinglyLinkedList`, `DoublyLinkedList` and `CircularLinkedList` can be built
from an iterable, support `len()` and iteration, and use 1-based node
positions: `insert_after(0, x)` puts `x` at the front and `delete(position)`
removes and returns a value. Positions out of range raise `IndexError`.
`SinglyLinkedList` also has `search`, `DoublyLinkedList` supports `reversed()`,
and both have an in-place `reverse`. `CircularLinkedList` adds `prepend`,
`pop_front`, `pop_back`, `delete_after(value)` (the node after the last one is
the first) and `clear`.

### `dsalgo.stacks_queues`

- `Stack` with `push`, `pop` and `fifo_order()`; iteration goes from the top.
- `Queue` with `enqueue` and `dequeue`.
- `Deque` with `push_front`, `push_back`, `pop_front` and `pop_back`.
- `concat_queues(first, second)` returns the values of both, in order.

Popping from an empty container raises `IndexError`.

### `dsalgo.trees`

- `TreeNode` with `preorder`, `inorder` and `postorder` returning lists.
- `BinarySearchTree` keeps one copy of each value; `insert` returns `False` for
  duplicates, and it supports `in`, `len()` and the three traversals.
- `SegmentTree(values).query(start, end)` returns the minimum over an inclusive
  index range; `start > end` raises `ValueError`, out-of-range indices raise
  `IndexError`.
- `Trie` stores case-insensitive words of English letters with `insert`, `in`
  and `remove` (which raises `KeyError` for a missing word).

### `dsalgo.graphs`

- `dfs(matrix, start=0)` returns the depth-first visiting order over a square
  adjacency matrix, trying neighbours in ascending order.
- `Graph(vertices)` is undirected, with `add_edge`, `neighbours` (newest edge
  first), `len()` and `bfs(start)`, which returns the breadth-first visiting
  order.

### `dsalgo.students`

`Student(roll, name, marks)` holds three subject marks, with `total()` and
`passed()` (a total of at least 120). `summarize(students)` returns a `Report`
with the students and the pass and fail counts.

## Examples

```python
from dsalgo.sorting import merge_sort
from dsalgo.searching import binary_search
from dsalgo.trees import SegmentTree, Trie

merge_sort([5, 2, 9, 1])              # [1, 2, 5, 9]
binary_search([2, 3, 4, 10, 40], 10)  # 3

tree = SegmentTree([3, 1, 5, 7, 2])
tree.query(2, 4)                      # 2

words = Trie()
words.insert("hello")
"hello" in words                      # True
```

```python
from dsalgo.graphs import Graph

graph = Graph(6)
for src, dest in [(0, 1), (0, 2), (1, 2), (1, 4), (1, 3), (2, 4), (3, 4)]:
    graph.add_edge(src, dest)
graph.bfs(0)                          # [0, 2, 1, 4, 3]
```

## What it does not do

This is a library only. It has no command-line program or interactive menu
for building lists, stacks or trees from typed-in input, and it does not read
or store student records anywhere; callers build the objects and print the
results themselves.