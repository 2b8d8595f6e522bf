"""
Sorted container implementations for the dictionary.
"""

from lexitree.models.sortedcontainers.binary_search_tree import BinarySearchTree, Node

__all__ = ["BinarySearchTree", "Node"]
