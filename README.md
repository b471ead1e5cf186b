# treeexplorer

treeexplorer is a small binary search tree set with no dependencies. It keeps
values unique and in order. The tree does not balance itself, so its shape
follows the order in which values are inserted.

## Installation

```
pip install treeexplorer
```

## Usage

```python
from treeexplorer.binary_tree_set import BinaryTreeSet

tree = BinaryTreeSet([50, 30, 70, 20, 40])
tree.insert(60)
tree.insert(30)           # duplicates are ignored

len(tree)                 # 6
30 in tree                # True
tree.contains(99)         # False
tree.height()             # 2 (an empty tree has height -1)

list(tree.inorder())      # [20, 30, 40, 50, 60, 70]
list(tree.preorder())     # [50, 30, 20, 40, 70, 60]
list(tree.postorder())    # [20, 40, 30, 60, 70, 50]

node = tree.find(30)      # a BinaryNode, or None when absent
node.value(), node.left().value(), node.right().value()   # (30, 20, 40)
tree.root().value()       # 50

tree.erase(50)            # True; the root takes its inorder successor, 60
tree.erase(999)           # False

other = BinaryTreeSet([10, 90])
tree.merge(other)         # `other` is left unchanged
tree.insert_range([1, 2, 3])

tree.clear()
tree.is_empty()           # True
bool(tree)                # False
```

Iterating over a `BinaryTreeSet` gives its values in ascending order, which is
the same as `inorder()`. `BinaryTreeSet()` with no argument starts empty.

### Nodes

`BinaryNode` (in `treeexplorer.binary_node`) gives read-only access to a node
through `value()`, `left()` and `right()`. The child accessors return `None`
when the child does not exist. A string value must not be empty. Constructing a
node with `""` raises `ValueError`, so `BinaryTreeSet.insert("")` raises it too.

Any values that compare with each other work, such as integers, floats and
strings.

### What it does not do

This is a library only. It has no command-line program. It does not balance
the tree, and it does not save trees to disk.

## Running the tests

```
pip install -e ".[test]"
pytest
```