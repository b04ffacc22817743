# dsakit

A small collection of classic data structures in plain Python, with no
dependencies. Each structure supports the usual Python protocols (`len`, `in`,
iteration) where they make sense. Operations that cannot go ahead raise an
exception instead of returning a sentinel value.

## Installation

```
pip install dsakit
```

## What's inside

| Module                      | Contents                                                          |
|-----------------------------|-------------------------------------------------------------------|
| `dsakit.dynamic_array`      | `DynamicArray`                                                    |
| `dsakit.singly_linked_list` | `SinglyLinkedList`                                                |
| `dsakit.stacks`             | `ArrayStack`, `LinkedStack`, `StackEmptyError`, `StackFullError`  |
| `dsakit.queues`             | `ArrayQueue`, `LinkedQueue`, `QueueEmptyError`, `QueueFullError`  |
| `dsakit.binary_tree`        | `BinaryTree`, `TreeNode`                                          |
| `dsakit.bst`                | `BinarySearchTree`                                                |
| `dsakit.graph`              | `Graph`                                                           |
| `dsakit.hash_table`         | `HashTable`                                                       |
| `dsakit.min_heap`           | `MinHeap`                                                         |
| `dsakit.trie`               | `Trie`                                                            |

### Notes on behaviour

- `DynamicArray(capacity=10)` doubles its reported `capacity()` whenever an
  insertion finds it full; `shrink_to_fit()` sets the capacity to `len()`.
  `remove_first()` and `remove_at()` return `None` on an empty array;
  `remove_last()`, `front()` and `back()` raise `IndexError`.
- `SinglyLinkedList.add_after(element, value)` inserts after the *last* node
  holding `element` and raises `ValueError` if there is none.
- `ArrayStack(capacity=100)` and `ArrayQueue(capacity=100)` are bounded and
  raise `StackFullError` / `QueueFullError` when full. All stacks and queues
  raise `StackEmptyError` / `QueueEmptyError` (subclasses of `IndexError`)
  when read or popped while empty. `LinkedStack` iterates from the top down.
- `BinaryTree` is unordered: a new item becomes a child of the first node on
  the left spine with a free slot. `search()` returns the `TreeNode` or `None`.
- `BinarySearchTree` puts equal keys in the right subtree; `delete()` replaces
  a node with two children by the largest key of its left subtree and does
  nothing if the key is absent. `find_min()` / `find_max()` return `None` on
  an empty tree. `inorder()`, `preorder()` and `postorder()` return lists.
- `Graph(vertices)` is undirected over `0 .. vertices - 1`; out-of-range
  vertices raise `IndexError`. `bfs()` and `dfs()` return lists of the
  reachable vertices; `str(graph)` gives the adjacency list.
- `HashTable(size=10)` chains integer keys into `key % size` buckets.
  `insert()` replaces an existing value, `search()` raises `KeyError` for a
  missing key, `remove()` ignores one, and `buckets()` returns a snapshot.
- `MinHeap.extract_min()` raises `IndexError` when empty; iteration yields the
  elements in storage order.
- `Trie` accepts only the letters `a` to `z` and raises `ValueError` for
  anything else. `remove()` returns whether the word was present and prunes
  unused nodes; `words()` lists all words alphabetically.

## Examples

```python
from dsakit.dynamic_array import DynamicArray

arr = DynamicArray()
for value in (10, 20, 30):
    arr.add_first(value)
print(list(arr))        # [30, 20, 10]
print(20 in arr)        # True
```

```python
from dsakit.singly_linked_list import SinglyLinkedList

lst = SinglyLinkedList()
lst.add_first(10)
lst.add_last(2)
lst.add_last(5)
lst.add_after(2, 9)
print(list(lst))        # [10, 2, 9, 5]
```

```python
from dsakit.stacks import ArrayStack
from dsakit.queues import LinkedQueue

stack = ArrayStack()
stack.push(30)
stack.push(20)
print(stack.peek())     # 20

queue = LinkedQueue()
queue.enqueue(10)
queue.enqueue(20)
print(queue.front(), queue.back())  # 10 20
```

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree()
for item in (45, 15, 79, 90, 10, 55, 12, 20, 50):
    tree.insert(item)
tree.delete(12)
print(tree.inorder())   # [10, 15, 20, 45, 50, 55, 79, 90]
print(55 in tree)       # True
```

```python
from dsakit.graph import Graph

g = Graph(6)
for u, v in [(0, 1), (0, 2), (1, 3), (1, 4), (2, 4), (3, 5), (4, 5)]:
    g.add_edge(u, v)
print(g.bfs(0))         # [0, 1, 2, 3, 4, 5]
print(g.dfs(0))         # [0, 1, 3, 5, 4, 2]
```

```python
from dsakit.hash_table import HashTable
from dsakit.min_heap import MinHeap
from dsakit.trie import Trie

table = HashTable()
table.insert(2, "Banana")
table.insert(12, "Orange")
print(table.search(12))       # Orange

heap = MinHeap()
for value in (10, 5, 20, 3, 15):
    heap.insert(value)
print(heap.extract_min())     # 3

trie = Trie()
for word in ("apple", "app", "ape", "bat", "bath"):
    trie.insert(word)
print(trie.count_words_with_prefix("ap"))  # 3
print(trie.words())           # ['ape', 'app', 'apple', 'bat', 'bath']
```

## What it does not do

dsakit is a library only: it has no command-line program, and its structures
live in memory with no saving to or loading from disk.

## Running the tests

```
pip install "dsakit[test]"
pytest
```