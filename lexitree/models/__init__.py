"""
Data models for the dictionary.
"""

from lexitree.models.exceptions import (
    InvalidKeyError,
    PersistenceError,
    ReadError,
    WriteError,
)
from lexitree.models.word_pair import WordPair
from lexitree.models.sortedcontainers import BinarySearchTree, Node

__all__ = [
    "InvalidKeyError",
    "PersistenceError",
    "ReadError",
    "WriteError",
    "WordPair",
    "BinarySearchTree",
    "Node",
]
