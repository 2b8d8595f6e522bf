"""
Configuration, logging setup and wiring for a SQLite-backed dictionary.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from lexitree.dictionary import EnglishRussianDictionary
from lexitree.storage import SQLiteWordPairStore

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class DictionaryConfig:
    """
    Settings for a dictionary persisted in SQLite.

    Attributes:
        db_path: SQLite database file.
        log_level: Name of the root logging level.
    """

    # Default database file, relative to the working directory
    DEFAULT_DB_PATH = "dictionary.db"

    db_path: str = DEFAULT_DB_PATH
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not self.db_path or not self.db_path.strip():
            raise ValueError("db_path cannot be empty")

        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DictionaryConfig":
        """
        Build a config from LEXITREE_DB_PATH and LOG_LEVEL.

        Args:
            environ: Mapping to read from. Defaults to os.environ.
        """
        if environ is None:
            environ = os.environ
        return cls(
            db_path=environ.get("LEXITREE_DB_PATH", cls.DEFAULT_DB_PATH),
            log_level=environ.get("LOG_LEVEL", "INFO"),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def build_dictionary(config: DictionaryConfig) -> EnglishRussianDictionary:
    """
    Create an empty dictionary reading from and writing to config.db_path.

    Call load() on the result to pull in the stored pairs.
    """
    store = SQLiteWordPairStore(config.db_path)
    return EnglishRussianDictionary(reader=store, writer=store)
