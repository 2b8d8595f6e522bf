"""
Binary-search-tree backed English-Russian dictionary.

This package provides an ordered key/value store with:
- insert(key, value) - O(depth), duplicate keys update in place
- find(key) - O(depth) ordinal descent
- delete(key) - leaf, one-child and successor-promotion removal
- size() - node count by full traversal
- load()/save() - synchronisation with an external word pair store
"""

from lexitree.dictionary import EnglishRussianDictionary
from lexitree.models.word_pair import WordPair

__all__ = ["EnglishRussianDictionary", "WordPair"]
