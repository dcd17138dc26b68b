"""
Game Configuration Constants Module

This module defines the game rules (attempt limit, word length) and loads
the word list that backs the dictionary. All game parameters are centralized
here to enable easy modification.
"""

import os
from functools import lru_cache
from typing import Dict, Final, Iterable, List, Optional, Tuple

from .app_config import Config

# Core Game Configuration Constants
MAX_ROUNDS: Final[int] = Config.MAX_ROUNDS
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

WORD_LENGTH: Final[int] = Config.WORD_LENGTH
"""
Required length of the answer and of every guess.
"""

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.txt'
)


def parse_word_list(lines: Iterable[str], word_length: int = WORD_LENGTH,
                    source: str = 'word list') -> List[str]:
    """
    Parse newline-delimited word list entries.

    Blank lines and surrounding whitespace are ignored, words are lowercased
    and duplicates are dropped while keeping input order.

    Args:
        lines: Raw entries, one word per line
        word_length: Required length of every entry
        source: Name used in error messages

    Returns:
        List[str]: Unique lowercase words

    Raises:
        ValueError: If the word list is empty or contains invalid words
    """
    words: List[str] = []
    seen = set()
    for line_number, line in enumerate(lines, start=1):
        word = line.strip().lower()
        if not word:
            continue
        if len(word) != word_length:
            raise ValueError(
                f"Word '{word}' on line {line_number} is not {word_length} characters long"
            )
        if not word.isalpha():
            raise ValueError(f"Word '{word}' on line {line_number} contains non-alphabetic characters")
        if word not in seen:
            seen.add(word)
            words.append(word)

    if not words:
        raise ValueError(f"Word list cannot be empty: {source}")

    return words


def load_word_list(path: Optional[str] = None, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Load a newline-delimited word list file.

    Args:
        path: Word list file, defaults to the bundled words.txt
        word_length: Required length of every entry

    Returns:
        List[str]: Unique lowercase words, see parse_word_list

    Raises:
        FileNotFoundError: If the word list file is not found
        ValueError: If the word list is empty or contains invalid words
    """
    file_path = path or DEFAULT_WORD_LIST_PATH

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {file_path}")

    return parse_word_list(lines, word_length, source=file_path)


@lru_cache(maxsize=None)
def get_word_list() -> Tuple[str, ...]:
    """
    Configured word database, loaded on first use.

    Reads WORD_LIST_PATH, or the bundled words.txt when unset. Nothing
    reads it at import time.
    """
    return tuple(load_word_list(Config.WORD_LIST_PATH, WORD_LENGTH))


def validate_word_list_integrity(word_list: Optional[Iterable[str]] = None,
                                 word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly word_length characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    words = list(get_word_list() if word_list is None else word_list)
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(word_list: Optional[Iterable[str]] = None) -> Dict:
    """
    Analyzes the word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters
    """
    words = list(get_word_list() if word_list is None else word_list)
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
