"""A direct-address phone book and a hash table of words with chaining."""

from __future__ import annotations

from typing import Iterable

_MULTIPLIER = 263
_PRIME = 1_000_000_007


class PhoneBook:
    """Names stored directly under phone numbers ``0..capacity-1``."""

    def __init__(self, capacity: int = 10_000_000) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._names: dict[int, str] = {}

    def _check(self, number: int) -> None:
        if not 0 <= number < self._capacity:
            raise IndexError(f"Number {number} is outside the phone book")

    def add(self, number: int, name: str) -> None:
        """Store ``name`` under ``number``, replacing any earlier name."""
        self._check(number)
        self._names[number] = name

    def delete(self, number: int) -> None:
        """Forget the name under ``number``; a missing number is ignored."""
        self._check(number)
        self._names.pop(number, None)

    def find(self, number: int) -> str | None:
        """The name under ``number``, or None if there is none."""
        self._check(number)
        return self._names.get(number)


class WordChain:
    """Set of words kept in hash buckets; new words go to the front of their bucket."""

    def __init__(self, buckets: int) -> None:
        if buckets <= 0:
            raise ValueError("buckets must be positive")
        self._buckets: list[list[str]] = [[] for _ in range(buckets)]

    def hash(self, word: str) -> int:
        """Polynomial hash with multiplier 263 modulo 1000000007, then modulo the bucket count."""
        value = 0
        for letter in reversed(word):
            value = (value * _MULTIPLIER + ord(letter)) % _PRIME
        return value % len(self._buckets)

    def add(self, word: str) -> None:
        """Add ``word`` unless it is already present."""
        bucket = self._buckets[self.hash(word)]
        if word not in bucket:
            bucket.insert(0, word)

    def delete(self, word: str) -> None:
        """Remove ``word`` if it is present."""
        bucket = self._buckets[self.hash(word)]
        if word in bucket:
            bucket.remove(word)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return word in self._buckets[self.hash(word)]

    def bucket(self, index: int) -> list[str]:
        """Words in bucket ``index``, most recently added first."""
        if not 0 <= index < len(self._buckets):
            raise IndexError(f"No bucket {index}")
        return list(self._buckets[index])


def run_word_queries(buckets: int, lines: Iterable[str]) -> list[str]:
    """Run ``add``/``del``/``find``/``check`` queries and return the output lines.

    ``find`` answers ``yes`` or ``no``; ``check`` lists a bucket's words
    separated by spaces. Unknown queries are ignored.
    """
    chain = WordChain(buckets)
    output: list[str] = []
    for line in lines:
        parts = line.split()
        if len(parts) < 2:
            continue
        query, argument = parts[0], parts[1]
        if query == "add":
            chain.add(argument)
        elif query == "del":
            chain.delete(argument)
        elif query == "find":
            output.append("yes" if argument in chain else "no")
        elif query == "check":
            output.append(" ".join(chain.bucket(int(argument))))
    return output