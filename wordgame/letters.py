from __future__ import annotations
from typing import List

ALPHABET_SIZE = 26
_BASE = ord('a')


def is_lowercase_word(word: str) -> bool:
    # ASCII a-z only; str.islower() would let through digits and accented letters
    for ch in word:
        if ch < 'a' or ch > 'z':
            return False
    return True


class LetterTally:
    """Per-letter counts of an ASCII lowercase string.

    Backed by a fixed 26-slot list indexed by ``ord(ch) - ord('a')``.
    Callers must check ``is_lowercase_word`` first; any other character
    raises ``ValueError``.
    """

    __slots__ = ('counts',)

    def __init__(self, counts: List[int] | None = None):
        self.counts: List[int] = list(counts) if counts is not None else [0] * ALPHABET_SIZE

    @classmethod
    def from_string(cls, text: str) -> LetterTally:
        tally = cls()
        for ch in text:
            idx = ord(ch) - _BASE
            if idx < 0 or idx >= ALPHABET_SIZE:
                raise ValueError(f"Not an ASCII lowercase letter: {ch!r}")
            tally.counts[idx] += 1
        return tally

    def count(self, letter: str) -> int:
        return self.counts[ord(letter) - _BASE]

    def fits_within(self, other: LetterTally) -> bool:
        for mine, available in zip(self.counts, other.counts):
            if mine > available:
                return False
        return True

    def __eq__(self, other):
        if not isinstance(other, LetterTally):
            return NotImplemented
        return self.counts == other.counts

    def __repr__(self) -> str:
        used = ''.join(chr(_BASE + i) * n for i, n in enumerate(self.counts))
        return f"LetterTally({used!r})"
