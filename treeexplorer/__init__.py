"""Binary search tree set with read-only node access and traversal helpers."""

__version__ = "1.0.0"
__all__ = ["binary_node", "binary_tree_set"]