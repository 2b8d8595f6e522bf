"""
Custom exceptions for the dictionary and its persistence boundary.
"""

from typing import Any


class InvalidKeyError(ValueError):
    """
    Raised when a tree operation receives a None key, or insert receives
    an empty one.

    Raised before any mutation, so the tree is left untouched.
    """

    def __init__(self, operation: str, reason: str = "key must not be None"):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation}: {reason}")


class PersistenceError(Exception):
    """Base class for failures reported by a word pair store."""


class ReadError(PersistenceError):
    """Raised when a word pair snapshot cannot be read."""

    def __init__(self, source: str, reason: str):
        """
        Initialize read error.

        Args:
            source: Identifier of the store that failed (e.g. a file path).
            reason: Description of the underlying failure.
        """
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to read word pairs from {source}: {reason}")


class WriteError(PersistenceError):
    """Raised when a single word pair cannot be written."""

    def __init__(self, source: str, record: Any, reason: str):
        """
        Initialize write error.

        Args:
            source: Identifier of the store that failed.
            record: The word pair that was being written.
            reason: Description of the underlying failure.
        """
        self.source = source
        self.record = record
        self.reason = reason
        super().__init__(f"Failed to write {record!r} to {source}: {reason}")
