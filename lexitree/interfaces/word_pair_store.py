"""
Capability interfaces at the persistence boundary.

The dictionary only ever reads a full snapshot and writes single pairs,
so the boundary is split into two narrow interfaces.
"""

from abc import ABC, abstractmethod

from lexitree.models.word_pair import WordPair


class WordPairReader(ABC):
    """Source of a full snapshot of stored translations."""

    @abstractmethod
    def read(self) -> list[WordPair]:
        """
        Read every stored word pair.

        Returns:
            All stored pairs, possibly empty.

        Raises:
            ReadError: If the store cannot be read.
        """
        pass


class WordPairWriter(ABC):
    """Sink accepting one word pair at a time."""

    @abstractmethod
    def write_one(self, record: WordPair) -> bool:
        """
        Persist a single word pair.

        Args:
            record: The pair to write.

        Returns:
            True if the pair was written.

        Raises:
            WriteError: If the store rejects the write.
        """
        pass
