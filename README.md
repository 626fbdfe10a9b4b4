# dsalgos

A collection of classic data structures and algorithms. Each module can be
used as a library and also has a small command-line demonstration.
There are no third-party dependencies.

## What is inside

| Module | What it provides |
| --- | --- |
| `dsalgos.avl_tree` | `AVLTree`: a self-balancing binary search tree with `insert`, `preorder`, in-order iteration, `in` and `len` |
| `dsalgos.friend_graph` | `FriendGraph`: an undirected adjacency-list graph with `add_node`, `add_friendship`, `friends` and `format` |
| `dsalgos.hamiltonian` | `find_hamiltonian_cycle`: a backtracking search over an adjacency matrix |
| `dsalgos.huffman` | `HuffmanNode`, `build_huffman_tree` and `huffman_codes` |
| `dsalgos.knapsack` | `Item`, `KnapsackResult`, `knapsack_backtracking` (exact 0/1) and `knapsack_greedy` (by value/weight ratio) |
| `dsalgos.n_queens` | `solve_n_queens` and `format_board` |
| `dsalgos.tsp` | `solve_tsp`: a travelling-salesman search that prunes branches with a running bound |
| `dsalgos.direct_access` | `StudentRecord`, `DirectAccessFile` and `HashTableFullError`: a fixed-size hashed binary file of student records with linear probing, with or without replacement |
| `dsalgos.prims` | `CityGraph`, `Edge` and `SpanningTree`: a city cost matrix with Prim's minimum spanning tree |
| `dsalgos.sorting_searching` | `User`, `quicksort_descending`, `mergesort`, `heapsort`, `linear_search`, `binary_search` and `format_users` |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

### AVL tree

```python
from dsalgos.avl_tree import AVLTree

tree = AVLTree([10, 20, 30, 40, 50, 25])
print(list(tree.preorder()))   # [30, 20, 10, 25, 40, 50]
print(list(tree))              # [10, 20, 25, 30, 40, 50]
print(25 in tree, len(tree))   # True 6
print(tree.insert(25))         # False: duplicates are ignored
```

### Huffman codes

```python
from collections import Counter
from dsalgos.huffman import huffman_codes

codes = huffman_codes(Counter("this is an example for huffman encoding"))
```

`huffman_codes` returns a dict from each symbol to its bit string, listed in
preorder of the tree. An empty frequency mapping raises `ValueError`.

### Knapsack

```python
from dsalgos.knapsack import Item, knapsack_backtracking, knapsack_greedy

items = [Item(weight=10, value=60), Item(weight=20, value=100), Item(weight=30, value=120)]
print(knapsack_backtracking(items, 50))  # KnapsackResult(value=220, selected=(1, 2))
print(knapsack_greedy(items, 50))        # KnapsackResult(value=160, selected=(0, 1))
```

The greedy result is not always optimal; its `selected` indices are in the
order the items were taken.

### Backtracking solvers

- `solve_n_queens(n)` returns an `n` by `n` board of 0s and 1s, or `None` if
  no placement exists; a negative `n` raises `ValueError`.
  `format_board(board)` renders it with `Q` and `.`.
- `find_hamiltonian_cycle(matrix)` returns a cycle that starts and ends at
  vertex 0, or `None`. An empty or non-square matrix raises `ValueError`.
- `solve_tsp(matrix)` returns `(cost, tour)` with the tour ending back at
  city 0, or `None`. A zero entry means there is no road. Fewer than two
  cities or a non-square matrix raises `ValueError`.

### Direct-access record file

```python
from dsalgos.direct_access import DirectAccessFile, StudentRecord

db = DirectAccessFile("students.dat")        # 10 slots by default
db.create()
db.add(StudentRecord(12, "Asha", "A", "Pune"))
db.add(StudentRecord(22, "Ravi", "B", "Nashik"), with_replacement=True)
print(db.search(22))
db.modify(12, "Asha", "C", "Mumbai")
print(db.records())
```

Records hash to slot `roll_no % table_size`; collisions go to the next free
slot and are linked through `chain`. With replacement, a record sitting in
another record's home slot is moved out for the owner. `add` raises
`HashTableFullError` when no slot is free and `ValueError` for a negative
roll number or a field too long for its fixed width (name 32, division 8,
address 64 bytes of UTF-8). `search` returns `None` for an absent record;
`modify` raises `KeyError`.

### Prim's minimum spanning tree

```python
from dsalgos.prims import CityGraph

graph = CityGraph(3)            # between 1 and 20 cities, numbered from 0
graph.connect(0, 1, 4)
graph.connect(1, 2, 1)
graph.connect(0, 2, 3)
tree = graph.prim(0)
print(tree.total, tree.edges)
print(graph.format_matrix())    # missing roads are shown as ∞
```

`prim` raises `ValueError` when some city cannot be reached.

### Sorting and searching

All sorts take any iterable of `User(number, name, bill_amount)` and return a
new list: `quicksort_descending` puts the largest number first, `mergesort`
and `heapsort` the smallest. `binary_search` expects users sorted by
ascending number. Both searches return the user or `None`.

## Commands

```
dsalgos-avl [KEY ...]        # builds an AVL tree (sample keys by default) and prints its preorder
dsalgos-friends              # prints a small friendship graph as adjacency lists
dsalgos-hamiltonian          # finds a Hamiltonian cycle in a five-vertex graph
dsalgos-huffman [TEXT]       # prints the Huffman code of every character in a text
dsalgos-knapsack [--capacity N]  # solves a sample knapsack exactly and greedily
dsalgos-queens [N]           # places N queens (default 8) on a board
dsalgos-tsp                  # solves a four-city travelling-salesman problem
dsalgos-direct-access [--file PATH]  # interactive menu over a hashed student file
dsalgos-prims                # reads city distances from standard input, then prints the MST
dsalgos-users                # reads up to 10 users from standard input, then sorts and searches
```

The interactive commands read whitespace-separated answers from standard
input, so they can also be driven by a piped file.

## What it does not do

Only the direct-access file keeps data between runs. The city graphs and user
lists entered in `dsalgos-prims` and `dsalgos-users` live only for the run
and are never saved. The record file uses this package's own fixed-width
binary layout and is not meant to be read by other tools.