"""A case-insensitive word list with fast prefix queries."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator
from os import PathLike


class Lexicon:
    """An immutable set of lower-case words that answers prefix queries."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        cleaned = (word.strip().lower() for word in words)
        self._words = frozenset(word for word in cleaned if word)
        self._sorted = sorted(self._words)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> Lexicon:
        """Load a lexicon from a text file holding one word per line."""
        with open(path, encoding="utf-8") as handle:
            return cls(handle)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._sorted)

    def contains_prefix(self, prefix: str) -> bool:
        """Return True if some word starts with ``prefix``; the empty prefix always matches."""
        prefix = prefix.lower()
        if not prefix:
            return True
        index = bisect_left(self._sorted, prefix)
        return index < len(self._sorted) and self._sorted[index].startswith(prefix)