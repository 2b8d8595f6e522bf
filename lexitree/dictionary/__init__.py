"""
Public dictionary API.
"""

from lexitree.dictionary.dictionary import EnglishRussianDictionary

__all__ = ["EnglishRussianDictionary"]
