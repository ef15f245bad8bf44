"""
Ordered Map
===========

Sorted ``str -> float`` map backed by an unbalanced binary search tree.

Keys are compared lexicographically. Insertion descends left when the new
key is strictly less than the node key and right otherwise; the tree is
never rebalanced, so its shape depends on insertion order. Key
enumeration is an in-order traversal and is always ascending.

Lookups are total: ``get`` on a missing key returns 0.0.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass
class _TreeNode:
    key: str
    value: float
    left: Optional["_TreeNode"] = None
    right: Optional["_TreeNode"] = None


def _get_node(node: Optional[_TreeNode], key: str) -> Optional[_TreeNode]:
    while node is not None:
        if key == node.key:
            return node
        node = node.left if key < node.key else node.right
    return None


def _insert_node(root: Optional[_TreeNode], key: str, value: float) -> _TreeNode:
    """Insert below root and return the (possibly new) root."""
    new = _TreeNode(key, value)
    if root is None:
        return new
    node = root
    while True:
        if key < node.key:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def _iter_in_order(node: Optional[_TreeNode]) -> Iterator[_TreeNode]:
    stack: List[_TreeNode] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _copy_node(node: Optional[_TreeNode]) -> Optional[_TreeNode]:
    if node is None:
        return None
    root = _TreeNode(node.key, node.value)
    pending = [(node, root)]
    while pending:
        src, dest = pending.pop()
        if src.left is not None:
            dest.left = _TreeNode(src.left.key, src.left.value)
            pending.append((src.left, dest.left))
        if src.right is not None:
            dest.right = _TreeNode(src.right.key, src.right.value)
            pending.append((src.right, dest.right))
    return root


def _subtree_is_contained_in(node: Optional[_TreeNode], other: "OrderedMap") -> bool:
    """Whether every (key, value) of the subtree rooted at node occurs in other."""
    pending = [node] if node is not None else []
    while pending:
        node = pending.pop()
        if not other.has_key(node.key) or other.get(node.key) != node.value:
            return False
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return True


class OrderedMap:
    """
    Binary-search-tree map from string keys to float values.

    Attributes:
        num_entries: Number of distinct keys inserted so far
    """

    def __init__(self):
        self._root: Optional[_TreeNode] = None
        self.num_entries = 0

    def set(self, key: str, value: float) -> None:
        """Insert key with value, or overwrite the value of an existing key."""
        node = _get_node(self._root, key)
        if node is not None:
            node.value = value
        else:
            self._root = _insert_node(self._root, key, value)
            self.num_entries += 1

    def get(self, key: str) -> float:
        """Value stored for key, 0.0 if the key was never set."""
        node = _get_node(self._root, key)
        return node.value if node is not None else 0.0

    def has_key(self, key: str) -> bool:
        return _get_node(self._root, key) is not None

    def keys(self) -> List[str]:
        """All keys in ascending order (computed on each call)."""
        return [node.key for node in _iter_in_order(self._root)]

    def equals(self, other: "OrderedMap") -> bool:
        """
        Structural equality.

        Two maps are equal when they hold the same number of entries and
        every entry of this map occurs, with the same value, in the other.
        Equal cardinality makes the one-way containment check sufficient.
        """
        if self.num_entries != other.num_entries:
            return False
        return _subtree_is_contained_in(self._root, other)

    def copy(self) -> "OrderedMap":
        result = OrderedMap()
        result._root = _copy_node(self._root)
        result.num_entries = self.num_entries
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __len__(self) -> int:
        return self.num_entries

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has_key(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self.get(k)!r}" for k in self.keys())
        return f"OrderedMap({{{items}}})"
