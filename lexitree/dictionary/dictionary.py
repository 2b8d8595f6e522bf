"""
EnglishRussianDictionary - Translation dictionary over a binary search tree.
"""

import logging
from collections.abc import Iterable, Iterator

from lexitree.interfaces.word_pair_store import WordPairReader, WordPairWriter
from lexitree.models.sortedcontainers import BinarySearchTree, Node
from lexitree.models.word_pair import WordPair

logger = logging.getLogger(__name__)


class EnglishRussianDictionary:
    """
    English to Russian dictionary backed by a BinarySearchTree.

    Provides:
    - insert(key, value) / set(key, value): Insert or update a translation
    - find(key) / get(key): Look up a translation
    - delete(key): Remove a translation
    - size(): Number of stored translations
    - load(): Insert every pair returned by the reader
    - save(records) / save_all(): Push pairs to the writer

    The dictionary never talks to the store on its own; persistence only
    happens when load or save is called.
    """

    def __init__(
        self,
        reader: WordPairReader,
        writer: WordPairWriter,
        tree: BinarySearchTree | None = None,
    ) -> None:
        """
        Initialize the dictionary.

        Args:
            reader: Source of the snapshot used by load().
            writer: Sink used by save() and save_all().
            tree: The backing tree. Defaults to an empty BinarySearchTree.
        """
        self._reader = reader
        self._writer = writer
        self._tree = tree if tree is not None else BinarySearchTree()

    @property
    def root(self) -> Node | None:
        """Root node of the backing tree, for structural inspection only."""
        return self._tree.root

    def insert(self, key: str, value: str | None) -> bool:
        return self._tree.insert(key, value)

    def find(self, key: str) -> str | None:
        return self._tree.find(key)

    def get(self, key: str) -> str | None:
        return self.find(key)

    def set(self, key: str, value: str | None) -> bool:
        return self.insert(key, value)

    def has(self, key: str) -> bool:
        return self._tree.has(key)

    def delete(self, key: str) -> bool:
        return self._tree.delete(key)

    def size(self) -> int:
        return self._tree.size()

    def load(self) -> int:
        """
        Insert every word pair returned by the reader.

        Pairs are applied in the order the reader returns them, so a later
        pair with a repeated key overwrites an earlier one. Insertions made
        before a failure are kept.

        Returns:
            Number of pairs applied.
        """
        count = 0
        for record in self._reader.read():
            self.insert(record.key, record.value)
            count += 1
        logger.info("Loaded %d word pairs", count)
        return count

    def save(self, records: WordPair | Iterable[WordPair]) -> bool | list[bool]:
        """
        Forward word pairs to the writer, one write per pair.

        Args:
            records: A single WordPair or an iterable of them.

        Returns:
            The writer's result for a single pair, or a list of results in
            input order for an iterable.

        Raises:
            TypeError: If records is a string, or contains anything other
                       than WordPairs. Nothing is written in that case.
        """
        if isinstance(records, WordPair):
            return self._write(records)
        if isinstance(records, (str, bytes)):
            raise TypeError(
                f"save() expects a WordPair or an iterable of WordPairs, got {type(records).__name__}"
            )

        batch = list(records)
        for record in batch:
            if not isinstance(record, WordPair):
                raise TypeError(f"save() expects WordPair items, got {type(record).__name__}")
        return [self._write(record) for record in batch]

    def save_all(self) -> list[bool]:
        """
        Write every stored translation, in ascending key order.

        Returns:
            List of the writer's results.
        """
        results = self.save(WordPair(key=key, value=value) for key, value in self)
        logger.info("Saved %d word pairs", len(results))
        return results

    def _write(self, record: WordPair) -> bool:
        logger.debug("Writing word pair %r", record.key)
        return self._writer.write_one(record)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._tree)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __getitem__(self, key: str) -> str | None:
        return self.find(key)

    def __setitem__(self, key: str, value: str | None) -> None:
        self.insert(key, value)
