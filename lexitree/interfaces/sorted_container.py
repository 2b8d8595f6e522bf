"""
SortedContainer abstract base class for sorted key-value data structures.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator


class SortedContainer(ABC):
    """
    Abstract base class for sorted key-value containers.

    Keys are unique and ordered by ordinal string comparison.

    Implementations:
    - BinarySearchTree: unbalanced, O(depth) operations
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Return an iterator over all key-value pairs in ascending key order."""
        pass

    @abstractmethod
    def insert(self, key: str, value: str | None) -> bool:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to insert/update.
            value: The value to associate with the key.

        Returns:
            True once the pair is stored.

        Raises:
            InvalidKeyError: If key is None or empty.
        """
        pass

    @abstractmethod
    def find(self, key: str) -> str | None:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            The value if found, None otherwise.

        Raises:
            InvalidKeyError: If key is None.
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.

        Raises:
            InvalidKeyError: If key is None.
        """
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Returns:
            The count of entries in the container.
        """
        pass
