# algoshelf

Classic data structures and algorithms as small, self-contained Python
modules. Only the standard library is used.

Requires Python 3.10 or later.

## Installation

```
pip install algoshelf
```

To run the tests:

```
pip install "algoshelf[test]"
pytest
```

## Contents

| Module | Contents |
| --- | --- |
| `algoshelf.doubly_linked_list` | `DoublyLinkedList` |
| `algoshelf.circular_linked_list` | `CircularLinkedList` |
| `algoshelf.linked_queue` | `LinkedQueue` |
| `algoshelf.array_queue` | `ArrayQueue` |
| `algoshelf.circular_queue` | `CircularQueue` |
| `algoshelf.stacks` | `MaxStack`, `run_max_queries`, `sort_stack`, `delete_middle`, `reverse_stack` |
| `algoshelf.sliding_window` | `sliding_window_max` |
| `algoshelf.heaps` | `MaxHeap`, `MinHeap`, `heap_sort` |
| `algoshelf.sorting` | `recursive_sort`, `selection_sort`, `insert_position` |
| `algoshelf.bst` | `BSTNode`, `insert`, `build`, `height`, `in_order` |
| `algoshelf.array_tree` | `level_order`, `padded_level_order`, `in_order`, `pre_order`, `post_order` |
| `algoshelf.avl` | `AVLTree` |
| `algoshelf.threaded_bst` | `ThreadedBST`, `DuplicateKeyError` |
| `algoshelf.dynamic` | `knapsack`, `knapsack_compact`, `rod_cutting`, `subset_sum_table`, `subset_sum`, `matrix_chain_cost` |
| `algoshelf.disjoint_sets` | `DisjointSets`, `TableMerger`, `Connectivity` |
| `algoshelf.graphs` | `DirectedGraph`, `UndirectedGraph` |
| `algoshelf.connect_points` | `Point`, `minimum_connection_length` |
| `algoshelf.hashing` | `PhoneBook`, `WordChain`, `run_word_queries` |
| `algoshelf.trie` | `Trie` |
| `algoshelf.suffix_array` | `sort_characters`, `character_classes`, `sort_doubled`, `update_classes`, `build_suffix_array`, `find_occurrences` |

### Lists and queues

- `DoublyLinkedList` and `CircularLinkedList` hold `(key, data)` pairs with
  unique keys: `append`, `prepend`, `insert_after`, `update`, `remove`,
  `peek`, `in`, `len()` and iteration. `render()` gives a text form such as
  `(1,10)<->(2,20)<->` or `(1,10)->(2,20)->`. `DoublyLinkedList` also
  supports `reversed()`.
- `LinkedQueue` is a FIFO of keyed members. `update(key, data)` first
  dequeues every member ahead of `key`, then sets its data.
- `ArrayQueue(capacity)` keeps its values at the front of a fixed array of
  slots, free slots holding `0`; `dequeue` shifts the rest forward.
  `count()` counts the non-zero slots and `slots()` returns all of them.
- `CircularQueue(capacity)` is a ring buffer; `items()` lists the values
  from front to back.

### Stacks and windows

- `MaxStack` reports its largest value with `max()` in constant time.
  `run_max_queries(lines)` runs `push N` / `pop` / `max` lines and returns
  the answers to `max`; a `max` on an empty stack gives no answer.
- `sort_stack`, `delete_middle` and `reverse_stack` take a sequence whose
  top is its last element and return a new list.
- `sliding_window_max(values, width)` returns the maximum of every window.

### Heaps and sorting

- `MaxHeap(capacity)` and `MinHeap(capacity)` are bounded heaps with
  `insert`, `extract_max` / `extract_min`, `remove(position)` and
  `change_priority(position, value)`; positions index into `items()`.
- `heap_sort`, `recursive_sort` and `selection_sort` return sorted lists.
- `insert_position(nums, target)` returns the index of `target` in a sorted
  sequence, or where it would be inserted.

### Trees

- `algoshelf.bst`: an unbalanced search tree in which equal values go left.
- `algoshelf.array_tree`: trees given as key/left/right tables (`-1` for no
  child) laid out in level order; `padded_level_order` puts `None` in place
  of missing nodes so positions follow heap indexing.
- `AVLTree`: a balanced tree of unique values; `insert` and `delete` return
  whether the tree changed, and `height()` gives its number of levels.
- `ThreadedBST(root_value)`: a threaded search tree iterated in order
  without a stack; inserting a present value raises `DuplicateKeyError`.

### Union-find and graphs

Elements and vertices are numbered from 1.

- `DisjointSets(size)`: union by rank; elements are made into sets with
  `make_set` first. `groups()` lists every set's members.
- `TableMerger(row_counts)`: merging moves all rows into the larger table;
  `max_rows()` is the largest row count.
- `Connectivity(vertices)`: `connected(x, y)` and `group_count()`.
- `DirectedGraph`: `dfs`, `is_cyclic`, `topological_order`,
  `strongly_connected_count`.
- `UndirectedGraph`: `distance` (fewest edges, `-1` if unreachable) and
  `is_bipartite`.
- `minimum_connection_length(points)`: total length of a minimum spanning
  tree over `Point`s or `(x, y)` tuples.

### Hashing, tries and suffix arrays

- `PhoneBook(capacity)` stores names under numbers `0..capacity-1`; `find`
  returns `None` for a number with no name.
- `WordChain(buckets)` is a hash set of words with chaining (polynomial hash,
  multiplier 263, modulo 1000000007). `run_word_queries(buckets, lines)`
  runs `add`/`del`/`find`/`check` lines and returns the output lines.
- `Trie(patterns)`: `edges()` lists `(parent, child, letter)`;
  `match_positions(text)` returns the start positions from which walking the
  trie reaches a leaf.
- `build_suffix_array(text)` sorts the cyclic shifts of `text` by prefix
  doubling; with a unique smallest final character such as `$` this is the
  suffix array. `find_occurrences(text, pattern, order)` returns the sorted
  start positions of `pattern`.

## Examples

```python
from algoshelf.avl import AVLTree

tree = AVLTree()
for value in (1, 2, 3, 4, 8, 7, 6, 5, 11, 10, 12):
    tree.insert(value)
print(tree.in_order())   # [1, 2, 3, 4, 5, 6, 7, 8, 10, 11, 12]
print(tree.height())
```

```python
from algoshelf.graphs import DirectedGraph, UndirectedGraph

g = DirectedGraph(4)
g.add_edge(1, 2)
g.add_edge(2, 3)
g.add_edge(3, 1)
print(g.is_cyclic())                  # True
print(g.strongly_connected_count())   # 2

u = UndirectedGraph(4)
u.add_edge(1, 2)
u.add_edge(2, 3)
print(u.distance(1, 3))   # 2
print(u.is_bipartite())   # True
```

```python
from algoshelf.dynamic import knapsack, matrix_chain_cost

print(knapsack([60, 100, 120], [10, 20, 30], 50))   # 220
print(matrix_chain_cost([1, 2, 3, 4]))              # 18
```

```python
from algoshelf.suffix_array import build_suffix_array, find_occurrences

text = "ababa$"
order = build_suffix_array(text)
print(find_occurrences(text, "aba", order))   # [0, 2]
```

## Errors

Failures raise exceptions instead of printing messages: duplicate keys in
the linked lists and `LinkedQueue` raise `ValueError`, missing keys raise
`KeyError`, and full or empty queues and heaps, as well as out-of-range
positions, raise `IndexError`. Some operations report instead of raising:
`AVLTree.insert`/`delete` and `DisjointSets.union` return a boolean,
`PhoneBook.find` returns `None`, and `WordChain.delete` ignores a missing word.

## What is not included

The package is a library only. It has no command-line program and no
interactive menus; the closest to a text interface are
`run_max_queries` and `run_word_queries`, which take query lines and
return their answers.