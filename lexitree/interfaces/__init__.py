"""
Abstract base classes for sorted containers and the persistence boundary.
"""

from lexitree.interfaces.sorted_container import SortedContainer
from lexitree.interfaces.word_pair_store import WordPairReader, WordPairWriter

__all__ = ["SortedContainer", "WordPairReader", "WordPairWriter"]
