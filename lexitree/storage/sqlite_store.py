"""
SQLite-backed word pair store.
"""

import logging
import sqlite3
from pathlib import Path

from lexitree.interfaces.word_pair_store import WordPairReader, WordPairWriter
from lexitree.models.exceptions import ReadError, WriteError
from lexitree.models.word_pair import WordPair

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS word_pairs (
    id    INTEGER PRIMARY KEY AUTOINCREMENT,
    key   TEXT NOT NULL,
    value TEXT NOT NULL
);
"""


class SQLiteWordPairStore(WordPairReader, WordPairWriter):
    """
    Reads and appends word pairs in an SQLite database file.

    A connection is opened per call and closed before returning. Each
    write is committed immediately; nothing is buffered.
    """

    def __init__(self, path: str | Path) -> None:
        """
        Initialize the store.

        Args:
            path: Database file. Created, along with the table, on first use.
        """
        self.path = Path(path)

    def read(self) -> list[WordPair]:
        """Return every stored pair in insertion (row id) order."""
        try:
            conn = self._connect()
            try:
                rows = conn.execute(
                    "SELECT id, key, value FROM word_pairs ORDER BY id"
                ).fetchall()
            finally:
                conn.close()
        except (sqlite3.Error, OSError) as exc:
            logger.error("SQLite read error for %s: %s", self.path, exc)
            raise ReadError(str(self.path), str(exc)) from exc

        return [WordPair(key=row["key"], value=row["value"], id=row["id"]) for row in rows]

    def write_one(self, record: WordPair) -> bool:
        """Append record as a new row. The record's id is ignored."""
        try:
            conn = self._connect()
            try:
                with conn:
                    conn.execute(
                        "INSERT INTO word_pairs (key, value) VALUES (?, ?)",
                        (record.key, record.value),
                    )
            finally:
                conn.close()
        except (sqlite3.Error, OSError) as exc:
            logger.error("SQLite write error for %s: %s", self.path, exc)
            raise WriteError(str(self.path), record, str(exc)) from exc

        logger.debug("Wrote word pair %r to %s", record.key, self.path)
        return True

    def _connect(self) -> sqlite3.Connection:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self.path))
        conn.row_factory = sqlite3.Row
        try:
            conn.executescript(_SCHEMA)
        except sqlite3.Error:
            conn.close()
            raise
        logger.debug("Opened SQLite connection to %s", self.path)
        return conn
