# labtrees

Classic data structures with plain Python interfaces: graphs, binary trees,
heaps, expression trees and fixed-size binary record files. There are no
dependencies outside the standard library.

## Install

```
pip install .
pip install ".[test]"   # adds pytest
```

## Modules

### `labtrees.graph`

- `Graph(edges=())` is an undirected graph.
  - `add_edge(a, b)` connects two nodes.
  - `neighbours(node)` returns the neighbours in sorted order.
  - `node in graph` tests whether a node is present.
  - `bfs(start)` and `dfs(start)` return the nodes reachable from `start`, in traversal order. Neighbours are visited in ascending order. An unknown start node raises `KeyError`.
- `CityMap(cities)` holds directed travel times between at most 20 uniquely named cities.
  - `add_route(source, target, minutes)` records a travel time. A time of 0 means there is no path.
  - `adjacency_matrix()`, `adjacency_list()` and `routes()` return the data in three shapes.
  - `format_matrix()` and `format_list()` render it as text.

### `labtrees.bst`

- `BinarySearchTree(values=())` is an unbalanced search tree. Equal values go to the right.
  - `insert(value)` adds a value.
  - `value in tree` tests membership.
  - Iterating over the tree yields the values in order.
  - `height()` counts the nodes on the longest path.
  - `minimum()` returns the smallest value and raises `ValueError` when the tree is empty.
  - `mirror()` swaps the children of every node.
  - `render()` draws the tree as text.
- `ProbabilityTree` is a search tree whose keys carry search probabilities. A key that is already present is ignored.
  - `insert(key, probability)` adds a key.
  - `search_cost()` sums the probabilities of all nodes.
- `build_probability_tree(keys, probabilities)` builds a `ProbabilityTree` from two sequences. It raises `ValueError` when their lengths differ.

### `labtrees.heap`

- `MarkHeaps(marks=())` keeps every mark in both a min-heap and a max-heap.
  - `add(mark)` inserts a mark into both heaps.
  - `minimum()` and `maximum()` return the extremes. They raise `ValueError` when no marks have been added.
  - `min_heap` and `max_heap` show the array layout of each heap.

### `labtrees.expression`

- `parse_prefix(expression)` builds an `ExpressionNode` tree from a prefix expression.
  - Letters are operands and `+ - * /` are operators.
  - Any other character is ignored.
  - A malformed expression raises `ValueError`.
- `preorder(node)` and `postorder(node)` return the traversal as a string.
- `deletion_order(node)` lists the nodes with children before their parents.

### `labtrees.records`

- `StudentFile(path)` is a sequential file of `Student(name, roll_no, division, address)` records.
- `EmployeeFile(data_path, index_path)` stores `Employee(name, emp_id, salary, designation)` records and reaches them through a separate index file.
- Both classes support `create`, `records`, `search`, `update`, `delete` and `append`.
  - A deleted record stays in the file as a blanked slot, marked with an id of `-1`.
  - `update` and `delete` raise `KeyError` for an unknown key.
  - Text fields that are too long for their fixed width raise `ValueError`.

### `labtrees.trees`

- `BinaryTree` is a general binary tree. `insert(value, path)` follows a path of directions, where `'r'`/`'R'` means right and anything else means left. `inorder()`, `levels()` and `height()` read the tree back.
- `BookNode(label, children)` models a book with its chapters, sections and subsections. Each node holds at most 10 children. `format_book(book)` renders the hierarchy as indented text.

## Example

```python
from labtrees.graph import Graph
from labtrees.bst import BinarySearchTree
from labtrees.heap import MarkHeaps
from labtrees.expression import parse_prefix, postorder

g = Graph([(1, 2), (1, 3), (2, 4)])
print(g.bfs(1))   # [1, 2, 3, 4]
print(g.dfs(1))   # [1, 2, 4, 3]

tree = BinarySearchTree([50, 30, 70, 20])
print(tree.minimum(), tree.height())   # 20 3
print(tree.render())

marks = MarkHeaps([70, 45, 90])
print(marks.minimum(), marks.maximum())   # 45 90

print(postorder(parse_prefix("+a*bc")))   # abc*+
```

## What it does not do

- It has no self-balancing tree and no keyword/meaning dictionary. `BinarySearchTree` does not rebalance.
- It provides a library only. There are no interactive menus and no command-line programs.

## Tests

```
pytest
```