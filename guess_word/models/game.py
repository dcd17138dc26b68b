"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple


class HitAccuracy(Enum):
    """Classification of a single guessed letter against the answer."""
    IN_RIGHT_PLACE = "IN_RIGHT_PLACE"
    IN_WORD = "IN_WORD"
    NOT_IN_WORD = "NOT_IN_WORD"


# Lower rank wins when merging letter hints across guesses
ACCURACY_RANK: Dict[HitAccuracy, int] = {
    HitAccuracy.IN_RIGHT_PLACE: 0,
    HitAccuracy.IN_WORD: 1,
    HitAccuracy.NOT_IN_WORD: 2,
}


class GameStatus(Enum):
    """Lifecycle of a single game."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


class GuessResult(Enum):
    """Outcome of submitting a guess. Only VALID mutates the game."""
    VALID = "VALID"
    DUPLICATE_GUESS = "DUPLICATE_GUESS"
    INCORRECT_LENGTH = "INCORRECT_LENGTH"
    NOT_IN_DICTIONARY = "NOT_IN_DICTIONARY"
    GAME_OVER = "GAME_OVER"


@dataclass(frozen=True)
class GuessLetter:
    """A guessed letter paired with its accuracy."""
    letter: str
    accuracy: HitAccuracy


@dataclass(frozen=True)
class WordGuess:
    """One fully scored guess, one GuessLetter per position."""
    letters: Tuple[GuessLetter, ...]

    @property
    def word(self) -> str:
        return ''.join(guess_letter.letter for guess_letter in self.letters)

    @property
    def is_correct(self) -> bool:
        return all(gl.accuracy is HitAccuracy.IN_RIGHT_PLACE for gl in self.letters)

    def to_pairs(self) -> List[Tuple[str, str]]:
        """Letter/accuracy pairs with the accuracy as a string for JSON serialization."""
        return [(gl.letter, gl.accuracy.value) for gl in self.letters]

    def __iter__(self) -> Iterator[GuessLetter]:
        return iter(self.letters)

    def __len__(self) -> int:
        return len(self.letters)


@dataclass
class GameState:
    """Server-side game state representation."""
    game_id: str
    current_round: int
    max_rounds: int
    word_length: int
    status: str
    game_over: bool
    won: bool
    guesses: List[str] = field(default_factory=list)
    guess_results: List[List[Tuple[str, str]]] = field(default_factory=list)  # Accuracy as string for JSON serialization
    letter_status: Dict[str, str] = field(default_factory=dict)
    answer: Optional[str] = None  # Only included when game is over


GUESS_RESULT_MESSAGES: Dict[GuessResult, str] = {
    GuessResult.VALID: "Guess accepted",
    GuessResult.DUPLICATE_GUESS: "Word already guessed",
    GuessResult.INCORRECT_LENGTH: "Guess has the wrong number of letters",
    GuessResult.NOT_IN_DICTIONARY: "Word not in word list",
    GuessResult.GAME_OVER: "Game is already over",
}


def describe_guess_result(result: GuessResult, word_length: Optional[int] = None) -> str:
    """Human readable message for a guess result."""
    if result is GuessResult.INCORRECT_LENGTH and word_length is not None:
        return f"Guess must be exactly {word_length} letters"
    return GUESS_RESULT_MESSAGES[result]
