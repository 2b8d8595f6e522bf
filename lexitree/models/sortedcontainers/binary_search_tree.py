"""
Unbalanced Binary Search Tree for sorted key-value storage.

No rebalancing is performed, so operations are O(depth) and a sorted
insertion order degenerates the tree into a list.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from lexitree.interfaces.sorted_container import SortedContainer
from lexitree.models.exceptions import InvalidKeyError


@dataclass
class Node:
    """Node in the Binary Search Tree. Owns its children."""

    key: str
    value: str
    left: "Node | None" = None
    right: "Node | None" = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class BinarySearchTree(SortedContainer):
    """
    Binary Search Tree implementation of SortedContainer.

    Properties maintained:
    1. Keys are unique; inserting an existing key replaces its value
    2. Every key in a node's left subtree is less than the node's key
    3. Every key in a node's right subtree is greater than the node's key

    Keys are compared ordinally (by code point), never by locale.
    """

    def __init__(self) -> None:
        self._root: Node | None = None

    @property
    def root(self) -> Node | None:
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    def insert(self, key: str, value: str | None) -> bool:
        """Insert or update a key-value pair. O(depth)"""
        if key is None:
            raise InvalidKeyError("insert")
        if key == "":
            raise InvalidKeyError("insert", "key must not be empty")
        if value is None:
            value = ""

        if self._root is None:
            self._root = Node(key=key, value=value)
            return True

        # Find insertion point
        parent = None
        current = self._root

        while current is not None:
            parent = current
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                # Key exists, update value
                current.value = value
                return True

        new_node = Node(key=key, value=value)
        if key < parent.key:
            parent.left = new_node
        else:
            parent.right = new_node
        return True

    def find(self, key: str) -> str | None:
        """Retrieve value by key. O(depth)"""
        if key is None:
            raise InvalidKeyError("find")
        node, _ = self._find_node_and_parent(key)
        return node.value if node else None

    def has(self, key: str) -> bool:
        if key is None:
            raise InvalidKeyError("has")
        node, _ = self._find_node_and_parent(key)
        return node is not None

    def delete(self, key: str) -> bool:
        """Remove a key-value pair. O(depth)"""
        if key is None:
            raise InvalidKeyError("delete")
        if self._root is None:
            return False

        node, parent = self._find_node_and_parent(key)
        if node is None:
            return False

        if node.is_leaf():
            self._remove_leaf(node, parent)
        elif node.left is None or node.right is None:
            self._remove_node_with_one_child(node, parent)
        else:
            self._remove_node_with_two_children(node)
        return True

    def size(self) -> int:
        """Count nodes by full traversal. O(n)"""
        return self._count_nodes(self._root)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Yield (key, value) pairs in ascending key order."""
        for node in _walk_in_order(self._root):
            yield node.key, node.value

    def _find_node_and_parent(self, key: str) -> tuple[Node | None, Node | None]:
        """
        Descend from the root looking for key.

        Returns:
            (node, parent) where node is None if key is absent. parent is
            None when node is the root, otherwise the last node visited.
        """
        parent = None
        current = self._root
        while current is not None and current.key != key:
            parent = current
            current = current.left if key < current.key else current.right
        return current, parent

    def _replace_child(self, parent: Node | None, node: Node, child: Node | None) -> None:
        """Point whichever link held node (parent's or the root) at child."""
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def _remove_leaf(self, node: Node, parent: Node | None) -> None:
        """Detach a node without children."""
        self._replace_child(parent, node, None)

    def _remove_node_with_one_child(self, node: Node, parent: Node | None) -> None:
        """Promote the only child of node into its position."""
        child = node.left if node.left is not None else node.right
        self._replace_child(parent, node, child)

    def _remove_node_with_two_children(self, node: Node) -> None:
        """
        Replace node's payload with its in-order successor's and unlink
        the successor.

        The successor is the leftmost node of the right subtree, so it never
        has a left child and is removed by relinking its parent to its right
        child.
        """
        successor_parent = node
        successor = node.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left

        node.key = successor.key
        node.value = successor.value

        if successor_parent.left is successor:
            successor_parent.left = successor.right
        else:
            successor_parent.right = successor.right

    @staticmethod
    def _count_nodes(node: Node | None) -> int:
        """Count the nodes of the subtree rooted at node."""
        return sum(1 for _ in _walk_in_order(node))


def _walk_in_order(node: Node | None) -> Iterator[Node]:
    """
    Visit every node under node exactly once, smallest key first.

    Uses an explicit stack so degenerate trees deeper than the recursion
    limit can still be walked. The tree must not change mid-walk.
    """
    stack: list[Node] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right
