"""
Shared pytest fixtures for dictionary tests.
"""

import os
import tempfile

import pytest

from lexitree.dictionary import EnglishRussianDictionary
from lexitree.interfaces import WordPairReader, WordPairWriter
from lexitree.models import BinarySearchTree, WordPair


class FakeReader(WordPairReader):
    """Reader returning a fixed snapshot and counting calls."""

    def __init__(self, records=None):
        self.records = list(records or [])
        self.calls = 0

    def read(self):
        self.calls += 1
        return list(self.records)


class FakeWriter(WordPairWriter):
    """Writer recording every pair it receives."""

    def __init__(self, result=True):
        self.written = []
        self.result = result

    def write_one(self, record):
        self.written.append(record)
        return self.result


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that is cleaned up after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def db_path(temp_dir):
    """Provide a path for an SQLite database file."""
    return os.path.join(temp_dir, "test.db")


@pytest.fixture
def reader():
    return FakeReader()


@pytest.fixture
def writer():
    return FakeWriter()


@pytest.fixture
def dictionary(reader, writer):
    """Provide an empty dictionary wired to fake reader and writer."""
    return EnglishRussianDictionary(reader, writer)


@pytest.fixture
def tree():
    return BinarySearchTree()


@pytest.fixture
def sample_pairs():
    """Provide sample word pairs for testing."""
    return [
        WordPair(key="hello", value="привет"),
        WordPair(key="world", value="мир"),
        WordPair(key="house", value="дом"),
    ]


def _assert_bst_ordered(node, low=None, high=None):
    """Assert every key under node lies strictly within (low, high)."""
    if node is None:
        return
    if low is not None:
        assert node.key > low
    if high is not None:
        assert node.key < high
    _assert_bst_ordered(node.left, low, node.key)
    _assert_bst_ordered(node.right, node.key, high)


def _count_reachable(node):
    if node is None:
        return 0
    return 1 + _count_reachable(node.left) + _count_reachable(node.right)


@pytest.fixture
def make_reader():
    """Provide a factory for readers returning a fixed snapshot."""
    return FakeReader


@pytest.fixture
def make_writer():
    """Provide a factory for writers recording what they receive."""
    return FakeWriter


@pytest.fixture
def assert_bst_ordered():
    """Provide a checker for the ordering invariant of a subtree."""
    return _assert_bst_ordered


@pytest.fixture
def count_reachable():
    """Provide a recursive node counter independent of the tree's own."""
    return _count_reachable
