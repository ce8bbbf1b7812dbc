# dsakit

A small library of classic data structures and algorithms:

| Module | What it holds |
| --- | --- |
| `dsakit.arrays` | `FixedArray` (fixed capacity, shifting insert/delete, sort, search), `linear_search`, `binary_search`, `ArrayFullError` |
| `dsakit.matrix` | `reshape`, `transpose`, `flatten`, `row_major_offset`, `column_major_offset`, `element_at`, `contains`, `format_matrix`, `format_array`, the `Order` enum |
| `dsakit.basics` | `fibonacci`, `fibonacci_calls`, `swap` |
| `dsakit.stacks` | `Stack` (optionally bounded), `StackOverflowError`, `StackUnderflowError` |
| `dsakit.expressions` | `infix_to_postfix`, `infix_to_prefix`, `precedence`, `is_operator`, `swap_parentheses` |
| `dsakit.queues` | `LinearQueue`, `CircularQueue`, `LinkedQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsakit.priority_queues` | `LinkedPriorityQueue` (highest priority first), `MinPriorityQueue` (smallest priority first), `PriorityItem` |
| `dsakit.hashing` | `ChainedHashTable`, `OpenAddressingTable`, `int_hash`, `string_hash`, `TableFullError` |
| `dsakit.linked_list` | `LinkedList`, `Node`, `traverse`, `format_values` |
| `dsakit.circular_list` | `CircularLinkedList` |
| `dsakit.bst` | `BinarySearchTree`, `TreeNode`, `in_order`, `pre_order`, `post_order` |
| `dsakit.heap` | `MaxHeap`, `HeapEmptyError` |
| `dsakit.avl` | `AVLTree`, `AVLNode`, `height`, `balance_factor`, `rotate_left`, `rotate_right` |

It has no dependencies beyond the standard library and needs Python 3.10 or later.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Fixed-capacity array with shifting insert and delete:

```python
from dsakit.arrays import FixedArray, binary_search

arr = FixedArray(5)
arr.insert(10, 0)
arr.insert(20, 1)
arr.insert(15, 1)
print(list(arr))        # [10, 15, 20]
print(arr.format())     # Values-> { 10, 15, 20 }
arr.remove(15)
print(15 in arr)        # False

print(binary_search([1, 2, 3, 4, 5], 4))   # 3
print(binary_search([1, 2, 3], 9))         # None
```

Inserting into a full `FixedArray` raises `ArrayFullError`; an index outside
the used part raises `IndexError`; removing a value that is absent raises
`ValueError`.

Matrices as lists of rows:

```python
from dsakit.matrix import reshape, transpose, flatten, element_at, format_matrix

m = reshape([1, 2, 3, 4, 5, 6], 2, 3)   # [[1, 2, 3], [4, 5, 6]]
print(transpose(m))                     # [[1, 4], [2, 5], [3, 6]]
print(flatten(m, "column"))             # [1, 4, 2, 5, 3, 6]
print(element_at(m, 1, 2, "column"))    # 6
print(format_matrix(m), end="")         # { 1, 2, 3 }\n{ 4, 5, 6 }
```

`reshape` raises `ValueError` when `rows * cols` differs from the number of values.

Basics:

```python
from dsakit.basics import fibonacci, fibonacci_calls, swap

print(fibonacci(5))        # 5
print(fibonacci_calls(5))  # 15 calls made by the naive recursion
print(swap(7, 5))          # (5, 7)
```

Stacks and expression conversion:

```python
from dsakit.stacks import Stack
from dsakit.expressions import infix_to_postfix, infix_to_prefix

st = Stack(3)
st.push(1)
st.push(2)
print(st.pop(), st.peek())          # 2 1

print(infix_to_postfix("a+b*c"))    # abc*+
print(infix_to_prefix("a+b*c"))     # +a*bc
```

Operands are single letters or digits; `+ -` bind weaker than `* / ^ %`.
Unbalanced parentheses raise `ValueError`.

Queues:

```python
from dsakit.queues import CircularQueue, LinkedQueue
from dsakit.priority_queues import LinkedPriorityQueue, MinPriorityQueue

cq = CircularQueue(5)
for v in (10, 20, 30):
    cq.enqueue(v)
print(cq.dequeue())   # 10

pq = MinPriorityQueue()
pq.push(10, 3)
pq.push(30, 1)
print(pq.pop())       # PriorityItem(data=30, priority=1)

lpq = LinkedPriorityQueue()
lpq.enqueue(10, 1)
lpq.enqueue(20, 3)
print(lpq.format())   # (20, priority: 3) (10, priority: 1)
```

A `LinearQueue` never reuses a slot: once `capacity` values have been
enqueued in total it reports full, even after dequeues. `CircularQueue`
reuses its slots. `LinkedQueue` is unbounded.

Hash tables:

```python
from dsakit.hashing import ChainedHashTable, OpenAddressingTable, string_hash

names = ChainedHashTable(10, string_hash)
names.insert("Alice")
print("Alice" in names)          # True

table = OpenAddressingTable(10)
table.insert_linear(10)          # returns slot 0
table.insert_linear(20)          # returns slot 1
print(table.slots())             # [10, 20, None, None, ...]
```

`OpenAddressingTable` also offers `insert_quadratic` and `insert_double_hash`.

Lists and trees:

```python
from dsakit.linked_list import LinkedList
from dsakit.bst import BinarySearchTree
from dsakit.avl import AVLTree
from dsakit.heap import MaxHeap

lst = LinkedList([3, 5])
lst.insert_at(4, 1)
print(lst.format())      # 3 -> 4 -> 5 -> nullptr

tree = BinarySearchTree([50, 30, 20, 40, 70, 60, 80])
tree.delete(50)
print(tree.in_order())   # [20, 30, 40, 60, 70, 80]

avl = AVLTree([10, 20, 30, 40, 50, 25])
print(avl.height(), avl.in_order())   # 3 [10, 20, 25, 30, 40, 50]

heap = MaxHeap()
for v in (50, 30, 40):
    heap.insert(v)
print(heap.get_max())    # 50
print(heap.delete_max()) # 50
```

## Errors

Failures are raised as exceptions: a full array raises `ArrayFullError`, a
full or empty stack `StackOverflowError` / `StackUnderflowError`, queues and
priority queues `QueueFullError` / `QueueEmptyError`, a full open-addressing
table `TableFullError`, and an empty heap `HeapEmptyError`. Bad positions
raise `IndexError`; missing values raise `ValueError`.

## What it does not do

dsakit is a library only. It installs no command and has no interactive
prompts: reading values from a keyboard and printing menus is left to the
program that uses it. The `format` methods return strings rather than
printing them.