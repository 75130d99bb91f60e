"""A case-insensitive word list stored in a table of 26 buckets."""

from __future__ import annotations

import string
from os import PathLike

LENGTH = 45
"""Maximum length of a word."""

BUCKETS = 26
"""Number of buckets in the hash table, one per initial letter."""


def hash_word(word: str) -> int:
    """Return the bucket index of ``word``: its first letter, A=0 to Z=25."""
    if not word or word[0] not in string.ascii_letters:
        raise ValueError(f"word must start with an ASCII letter: {word!r}")
    return ord(word[0].upper()) - ord("A")


class Dictionary:
    """A set of words that is checked without regard to case."""

    def __init__(self) -> None:
        self._buckets: list[set[str]] = [set() for _ in range(BUCKETS)]
        self._count = 0

    def load(self, path: str | PathLike[str]) -> None:
        """Replace the contents with the whitespace-separated words of a file.

        Raises OSError if the file cannot be read, ValueError if a word
        does not start with a letter.
        """
        self.unload()
        with open(path, encoding="latin-1") as handle:
            for line in handle:
                for word in line.split():
                    self._buckets[hash_word(word)].add(word.lower())
                    self._count += 1

    def check(self, word: str) -> bool:
        """Return True if ``word`` is in the dictionary, ignoring case."""
        try:
            bucket = self._buckets[hash_word(word)]
        except ValueError:
            return False
        return word.lower() in bucket

    def size(self) -> int:
        """Return the number of words loaded, duplicates included."""
        return self._count

    def unload(self) -> None:
        """Remove every word."""
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.check(word)