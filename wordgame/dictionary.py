from __future__ import annotations
from typing import Iterable, Iterator, List, Protocol, Set, runtime_checkable

# Reference word collections an application may consult next to a scoreboard.
# The scoreboard itself never looks words up here.


@runtime_checkable
class WordSet(Protocol):
    """Membership test plus entry count; the only surface callers depend on."""

    def contains(self, word: str) -> bool:
        ...

    def size(self) -> int:
        ...


class _WordCollection:
    # Subclasses provide __init__(word), add, contains, size and __iter__

    @classmethod
    def from_words(cls, words: Iterable[str]):
        it = iter(words)
        try:
            first = next(it)
        except StopIteration:
            raise ValueError("from_words needs at least one word") from None
        lexicon = cls(first)
        for w in it:
            lexicon.add(w)
        return lexicon

    def __contains__(self, word) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return self.size()


class AllowedWords(_WordCollection):
    """List-backed lexicon. ``add`` performs no dedup, so ``size`` counts repeats."""

    def __init__(self, word: str):
        self._words: List[str] = [word]

    def add(self, word: str) -> None:
        self._words.append(word)

    def contains(self, word: str) -> bool:
        return word in self._words

    def size(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)


class HashedWords(_WordCollection):
    # Same surface as AllowedWords over a set: O(1) lookups, repeats collapse
    def __init__(self, word: str):
        self._words: Set[str] = {word}

    def add(self, word: str) -> None:
        self._words.add(word)

    def contains(self, word: str) -> bool:
        return word in self._words

    def size(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))
