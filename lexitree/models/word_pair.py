"""
WordPair transfer record exchanged with the persistence boundary.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WordPair:
    """
    An English word and its Russian translation.

    Attributes:
        key: The English word.
        value: The Russian translation.
        id: Row identity assigned by the store, None for unsaved pairs.
            Ignored by the dictionary.
    """

    key: str
    value: str
    id: int | None = None

    def as_tuple(self) -> tuple[str, str]:
        return (self.key, self.value)
