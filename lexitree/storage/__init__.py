"""
Word pair store implementations.
"""

from lexitree.storage.sqlite_store import SQLiteWordPairStore

__all__ = ["SQLiteWordPairStore"]
