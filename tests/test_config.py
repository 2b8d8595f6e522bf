"""
Tests for configuration and wiring.
"""

import logging

import pytest

from lexitree.config import DictionaryConfig, build_dictionary, configure_logging
from lexitree.dictionary import EnglishRussianDictionary
from lexitree.models import WordPair
from lexitree.storage import SQLiteWordPairStore


class TestDictionaryConfig:
    """Tests for DictionaryConfig."""

    def test_defaults(self):
        config = DictionaryConfig()
        assert config.db_path == "dictionary.db"
        assert config.log_level == "INFO"

    def test_log_level_normalised(self):
        assert DictionaryConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="log_level"):
            DictionaryConfig(log_level="chatty")

    @pytest.mark.parametrize("path", ["", "   "])
    def test_empty_db_path(self, path):
        with pytest.raises(ValueError, match="db_path"):
            DictionaryConfig(db_path=path)

    def test_from_env(self):
        config = DictionaryConfig.from_env(
            {"LEXITREE_DB_PATH": "/tmp/words.db", "LOG_LEVEL": "warning"}
        )
        assert config.db_path == "/tmp/words.db"
        assert config.log_level == "WARNING"

    def test_from_env_defaults(self):
        config = DictionaryConfig.from_env({})
        assert config.db_path == DictionaryConfig.DEFAULT_DB_PATH
        assert config.log_level == "INFO"


class TestWiring:
    """Tests for build_dictionary and configure_logging."""

    def test_build_dictionary(self, db_path):
        SQLiteWordPairStore(db_path).write_one(WordPair(key="sun", value="солнце"))

        dictionary = build_dictionary(DictionaryConfig(db_path=db_path))
        assert isinstance(dictionary, EnglishRussianDictionary)
        assert dictionary.size() == 0

        dictionary.load()
        assert dictionary.find("sun") == "солнце"

        dictionary.save(WordPair(key="moon", value="луна"))
        assert len(SQLiteWordPairStore(db_path).read()) == 2

    def test_configure_logging(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging("debug")
        assert calls[0]["level"] == "DEBUG"
        assert "%(levelname)s" in calls[0]["format"]
