"""
Dictionary Service

Immutable set of valid fixed-length words backing a game.
"""

import random
from typing import FrozenSet, Iterable, Optional, Tuple

from ..config.game_settings import WORD_LENGTH, load_word_list, parse_word_list


class Dictionary:
    """
    Read-only set of words that all share one length.

    A Dictionary is built once and may be shared by any number of games.
    Membership is case-sensitive. The constructor keeps words exactly as
    given; from_lines and from_file apply the word list policy of
    parse_word_list (trimmed, lowercased, alphabetic, deduplicated).
    """

    def __init__(self, words: Iterable[str], word_length: int = WORD_LENGTH):
        unique_words = frozenset(words)

        if not unique_words:
            raise ValueError("Dictionary cannot be empty")

        invalid = sorted(word for word in unique_words if len(word) != word_length)
        if invalid:
            raise ValueError(f"Words not {word_length} characters long: {invalid[:10]}")

        self._words: FrozenSet[str] = unique_words
        self._word_length = word_length
        # Stable order so a seeded rng always picks the same word
        self._ordered: Tuple[str, ...] = tuple(sorted(unique_words))

    @classmethod
    def from_lines(cls, lines: Iterable[str], word_length: int = WORD_LENGTH) -> "Dictionary":
        """Build from newline-delimited entries, skipping blank lines."""
        return cls(parse_word_list(lines, word_length), word_length)

    @classmethod
    def from_file(cls, path: Optional[str] = None, word_length: int = WORD_LENGTH) -> "Dictionary":
        """Build from a word list file (the bundled words.txt by default), parsed like from_lines."""
        return cls(load_word_list(path, word_length), word_length)

    @property
    def word_length(self) -> int:
        return self._word_length

    def contains(self, word: str) -> bool:
        return word in self._words

    def random_word(self, rng: Optional[random.Random] = None) -> str:
        """Uniformly pick a word, optionally from a caller-supplied generator."""
        return (rng or random).choice(self._ordered)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(self._ordered)

    def __repr__(self) -> str:
        return f"Dictionary(words={len(self._words)}, word_length={self._word_length})"
