"""An ordered set of unique values backed by an unbalanced binary search tree."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

from treeexplorer.binary_node import BinaryNode

T = TypeVar("T")


class BinaryTreeSet(Generic[T]):
    """A set of unique, ordered values stored in a binary search tree.

    Smaller values go to the left subtree and larger ones to the right.
    Duplicates are ignored on insertion.
    """

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[BinaryNode[T]] = None
        self._size = 0
        if values is not None:
            self.insert_range(values)

    def root(self) -> Optional[BinaryNode[T]]:
        """Return the root node, or None if the set is empty."""
        return self._root

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return self.inorder()

    def __repr__(self) -> str:
        return f"BinaryTreeSet({list(self.inorder())!r})"

    def is_empty(self) -> bool:
        """Return True if the set holds no values."""
        return self._root is None

    def height(self) -> int:
        """Return the number of edges on the longest root-to-leaf path (-1 if empty)."""
        best = -1
        stack: list[tuple[BinaryNode[T], int]] = []
        if self._root is not None:
            stack.append((self._root, 0))
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in (node.left(), node.right()):
                if child is not None:
                    stack.append((child, depth + 1))
        return best

    def insert(self, value: T) -> None:
        """Insert a value unless an equal one is already present."""
        if self._root is None:
            self._root = BinaryNode(value)
            self._size += 1
            return
        node = self._root
        while True:
            current = node.value()
            if value < current:
                child = node.left()
                if child is None:
                    node._set_left(BinaryNode(value))
                    break
                node = child
            elif value > current:
                child = node.right()
                if child is None:
                    node._set_right(BinaryNode(value))
                    break
                node = child
            else:
                return
        self._size += 1

    def insert_range(self, values: Iterable[T]) -> None:
        """Insert every value from an iterable, skipping ones already present."""
        for value in values:
            self.insert(value)

    def merge(self, other: BinaryTreeSet[T]) -> None:
        """Insert all values of another set into this one; the other is unchanged."""
        for value in list(other.inorder()):
            self.insert(value)

    def contains(self, value: T) -> bool:
        """Return True if the value is in the set."""
        return self.find(value) is not None

    def find(self, value: T) -> Optional[BinaryNode[T]]:
        """Return the node holding the value, or None if it is absent."""
        node = self._root
        while node is not None:
            current = node.value()
            if value == current:
                return node
            node = node.left() if value < current else node.right()
        return None

    def erase(self, value: T) -> bool:
        """Remove the value; return True if it was present.

        A node with two children takes the value of its in-order successor,
        which is then removed from the right subtree.
        """
        parent: Optional[BinaryNode[T]] = None
        node = self._root
        while node is not None:
            current = node.value()
            if value < current:
                parent, node = node, node.left()
            elif value > current:
                parent, node = node, node.right()
            else:
                break
        if node is None:
            return False

        left, right = node.left(), node.right()
        if left is not None and right is not None:
            succ_parent = node
            succ = right
            while succ.left() is not None:
                succ_parent = succ
                succ = succ.left()  # type: ignore[assignment]
            node._set_value(succ.value())
            if succ_parent is node:
                node._set_right(succ.right())
            else:
                succ_parent._set_left(succ.right())
        else:
            replacement = right if left is None else left
            if parent is None:
                self._root = replacement
            elif parent.left() is node:
                parent._set_left(replacement)
            else:
                parent._set_right(replacement)

        self._size -= 1
        return True

    def clear(self) -> None:
        """Remove every value from the set."""
        self._root = None
        self._size = 0

    def inorder(self) -> Iterator[T]:
        """Yield values left subtree, node, right subtree: ascending order."""
        stack: list[BinaryNode[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left()
            node = stack.pop()
            yield node.value()
            node = node.right()

    def preorder(self) -> Iterator[T]:
        """Yield values node first, then left subtree, then right subtree."""
        stack: list[BinaryNode[T]] = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.value()
            right, left = node.right(), node.left()
            if right is not None:
                stack.append(right)
            if left is not None:
                stack.append(left)

    def postorder(self) -> Iterator[T]:
        """Yield values left subtree, right subtree, then the node itself."""
        stack: list[tuple[BinaryNode[T], bool]] = []
        if self._root is not None:
            stack.append((self._root, False))
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.value()
                continue
            stack.append((node, True))
            right, left = node.right(), node.left()
            if right is not None:
                stack.append((right, False))
            if left is not None:
                stack.append((left, False))