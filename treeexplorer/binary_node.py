"""A single node of a binary search tree set."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


def _validate(value: object, message: str) -> None:
    if isinstance(value, str) and not value:
        raise ValueError(message)


class BinaryNode(Generic[T]):
    """A tree node holding a value and links to its left and right children.

    Users get read-only access to the value and children. The owning tree
    set restructures nodes through the underscore-prefixed helpers.
    """

    __slots__ = ("_value", "_left", "_right")

    def __init__(self, value: T) -> None:
        _validate(value, "String value cannot be empty")
        self._value: T = value
        self._left: Optional[BinaryNode[T]] = None
        self._right: Optional[BinaryNode[T]] = None

    def value(self) -> T:
        """Return the value stored in this node."""
        return self._value

    def left(self) -> Optional[BinaryNode[T]]:
        """Return the left child, or None if there is none."""
        return self._left

    def right(self) -> Optional[BinaryNode[T]]:
        """Return the right child, or None if there is none."""
        return self._right

    def _set_value(self, value: T) -> T:
        _validate(value, "String value cannot be set to empty ('')")
        self._value = value
        return value

    def _set_left(self, node: Optional[BinaryNode[T]]) -> None:
        self._left = node

    def _set_right(self, node: Optional[BinaryNode[T]]) -> None:
        self._right = node

    def __repr__(self) -> str:
        return f"BinaryNode({self._value!r})"