# algokit

A small collection of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module              | Contents                                                                  |
|---------------------|---------------------------------------------------------------------------|
| `algokit.sorting`   | `bubble_sort`, `selection_sort`, `insertion_sort`, `insertion_sort_descending`, `merge_sort`, `quick_sort` |
| `algokit.search`    | `linear_search`, `binary_search`                                          |
| `algokit.basics`    | `average`, `factorial`, `triangle_pattern`, `reversed_triangle_pattern`   |
| `algokit.linked`    | `ListNode`, `from_iterable`, `to_list`, `add_two_numbers`, `has_cycle`, `CircularList`, `DoublyLinkedList`, `Student`, `MultiLinkedList` |
| `algokit.dynamic`   | `LinkedStack`, `LinkedQueue`: unbounded, node-based                       |
| `algokit.stacks`    | `BoundedStack`, `reverse_string`                                          |
| `algokit.queues`    | `SimpleQueue`, `CircularQueue`: fixed capacity                            |
| `algokit.records`   | `StudentRecord`, `Employee`, `MarksTracker`                               |
| `algokit.bst`       | `BinarySearchTree` with search, min/max, successor, predecessor, delete   |
| `algokit.rbtree`    | `RedBlackTree`, `Color`                                                   |
| `algokit.errors`    | `CapacityError` (an `OverflowError`), `EmptyError` (an `IndexError`)      |

## Behaviour in brief

- Every sort takes any iterable, leaves it untouched and returns a new list.
  `insertion_sort_descending` sorts from largest to smallest; the others sort
  ascending. `merge_sort` is stable.
- `linear_search` and `binary_search` return an index, or `None` when the
  target is absent. `binary_search` expects an ascending sequence.
- `average` and `MarksTracker.average` raise `ValueError` when there is
  nothing to average; `factorial` raises `ValueError` for negative numbers.
  The star patterns return strings, one line per row, each ending in `\n`.
- `to_list` raises `ValueError` if the list loops back on itself;
  `has_cycle` detects that with Floyd's tortoise and hare.
- `add_two_numbers` adds two numbers stored as digit lists, least significant
  digit first.
- `MultiLinkedList` keeps the same `Student` nodes in two sorted chains,
  walked with `by_id()` and `by_age()`.
- `DoublyLinkedList.insert_after` raises `ValueError` if the anchor value is
  not in the list.
- Popping, dequeuing or peeking an empty stack or queue raises `EmptyError`.
  Pushing onto a full `BoundedStack` or enqueuing onto a full `SimpleQueue` or
  `CircularQueue` raises `CapacityError`. The bounded containers default to a
  capacity of 5.
- `SimpleQueue` does not reuse slots freed by dequeuing until it has been
  emptied completely, so it can report full while holding fewer values;
  `CircularQueue` reuses them.
- `reverse_string` reverses text through a `BoundedStack` of capacity 100 and
  raises `CapacityError` for longer text.
- `LinkedStack.render()` and `LinkedQueue.render()` return the values as
  `"1 -> 2 -> NULL"`, or `"List is empty."`.
- `StudentRecord.describe()` and `Employee.describe()` return one-line
  summaries (CGPA to two decimals, salary to three).
- Both trees allow duplicate values. `minimum()` (and `maximum()` on
  `BinarySearchTree`) raise `EmptyError` on an empty tree; `successor` and
  `predecessor` raise `KeyError` for a value not in the tree and return `None`
  at either end. `delete` removes one matching node and returns whether it
  found one. `RedBlackTree.inorder()` returns `(value, Color)` pairs.

## Examples

Sorting and searching:

```python
from algokit.sorting import merge_sort, quick_sort
from algokit.search import binary_search, linear_search

data = merge_sort([23, 65, 12, 45, 10, 5, 7])   # [5, 7, 10, 12, 23, 45, 65]
binary_search(data, 45)                          # 5
linear_search([10, 20, 25, 30], 20)              # 1
```

Bounded containers raise instead of overflowing:

```python
from algokit.queues import CircularQueue
from algokit.errors import CapacityError

queue = CircularQueue(5)
for value in (10, 20, 40, 60, 80):
    queue.enqueue(value)
try:
    queue.enqueue(12)
except CapacityError:
    ...
queue.dequeue()                                  # 10
```

Linked lists:

```python
from algokit.linked import add_two_numbers, from_iterable, to_list

total = add_two_numbers(from_iterable([2, 4, 3]), from_iterable([5, 6, 4]))
to_list(total)                                   # [7, 0, 8]
```

Search trees:

```python
from algokit.bst import BinarySearchTree
from algokit.rbtree import RedBlackTree

tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80])
tree.successor(40)                               # 50
tree.delete(30)                                  # True
list(tree)                                       # [20, 40, 50, 60, 70, 80]

rb = RedBlackTree([10, 20, 30, 15, 75, 45, 65])
rb.inorder()
rb.root_color()                                  # Color.BLACK
```

## What this package does not do

It is a library only: there is no command-line program and no interactive
menu for driving the stacks, queues or records, and nothing is read from or
saved to disk.