"""
Game Logic

Contains the letter scoring algorithm and the single-game state machine.
"""

import logging
import random
from collections import Counter
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import MAX_ROUNDS
from ..models.game import (
    ACCURACY_RANK, GameStatus, GuessLetter, GuessResult, HitAccuracy, WordGuess
)
from .dictionary import Dictionary

logger = logging.getLogger(__name__)


class GuessWordError(Exception):
    """Base class for errors raised by the game core."""


class AnswerNotRevealable(GuessWordError):
    """The answer was requested while the game is still in progress."""

    def __init__(self, status: GameStatus):
        super().__init__(f"Answer is hidden until the game is over (status: {status.value})")
        self.status = status


def score_guess(guess: str, answer: str) -> WordGuess:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches claim their letter first, so a repeated letter elsewhere
    in the guess is only reported IN_WORD while the answer still has an
    unclaimed copy of it.
    """
    if len(guess) != len(answer):
        raise ValueError(f"Cannot score '{guess}' against an answer of length {len(answer)}")

    remaining = Counter(answer)
    accuracies: List[Optional[HitAccuracy]] = [None] * len(guess)

    # First pass: exact position matches
    for i, (guess_char, answer_char) in enumerate(zip(guess, answer)):
        if guess_char == answer_char:
            accuracies[i] = HitAccuracy.IN_RIGHT_PLACE
            remaining[guess_char] -= 1

    # Second pass: present letters and misses, left to right
    for i, guess_char in enumerate(guess):
        if accuracies[i] is not None:
            continue
        if remaining[guess_char] > 0:
            accuracies[i] = HitAccuracy.IN_WORD
            remaining[guess_char] -= 1
        else:
            accuracies[i] = HitAccuracy.NOT_IN_WORD

    return WordGuess(tuple(
        GuessLetter(letter, accuracy) for letter, accuracy in zip(guess, accuracies)
    ))


class Game:
    """
    A single game against one hidden answer.

    The only mutator is guess(). Rejected guesses are reported through
    GuessResult and never change the history or the status. Calls are not
    reentrant; callers sharing a Game across threads must serialize them.
    """

    def __init__(self,
                 dictionary: Dictionary,
                 answer: Optional[str] = None,
                 max_rounds: int = MAX_ROUNDS,
                 rng: Optional[random.Random] = None):
        if max_rounds < 1:
            raise ValueError("max_rounds must be at least 1")

        if answer is None:
            answer = dictionary.random_word(rng)
        elif answer not in dictionary:
            raise ValueError(f"Answer '{answer}' is not in the dictionary")

        self._dictionary = dictionary
        self._answer = answer
        self._max_rounds = max_rounds
        self._history: List[WordGuess] = []
        self._status = GameStatus.IN_PROGRESS

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def word_length(self) -> int:
        return self._dictionary.word_length

    @property
    def max_rounds(self) -> int:
        return self._max_rounds

    @property
    def attempts_left(self) -> int:
        return self._max_rounds - len(self._history)

    @property
    def is_over(self) -> bool:
        return self._status.is_terminal

    def guess_history(self) -> Tuple[WordGuess, ...]:
        return tuple(self._history)

    def answer(self) -> str:
        """
        Reveal the answer.

        Raises:
            AnswerNotRevealable: If the game has not been won or lost yet
        """
        if not self._status.is_terminal:
            raise AnswerNotRevealable(self._status)
        return self._answer

    def guess(self, word: str) -> Tuple[GameStatus, GuessResult]:
        """
        Validate, score and record a guess.

        Args:
            word: The guessed word, compared case-sensitively

        Returns:
            Tuple of (status after the call, result of this guess)
        """
        if self._status.is_terminal:
            return self._status, GuessResult.GAME_OVER

        if len(word) != self.word_length:
            return self._status, GuessResult.INCORRECT_LENGTH

        if any(previous.word == word for previous in self._history):
            return self._status, GuessResult.DUPLICATE_GUESS

        if not self._dictionary.contains(word):
            return self._status, GuessResult.NOT_IN_DICTIONARY

        self._history.append(score_guess(word, self._answer))

        if word == self._answer:
            self._status = GameStatus.WON
        elif len(self._history) >= self._max_rounds:
            self._status = GameStatus.LOST

        if self._status.is_terminal:
            logger.debug("Game finished with %s after %d guesses", self._status.value, len(self._history))

        return self._status, GuessResult.VALID

    def letter_status(self) -> Dict[str, str]:
        """
        Best accuracy seen so far for every guessed letter.

        Status can only progress in priority order:
        NOT_IN_WORD, then IN_WORD, then IN_RIGHT_PLACE.
        """
        best: Dict[str, HitAccuracy] = {}
        for word_guess in self._history:
            for guess_letter in word_guess:
                current = best.get(guess_letter.letter)
                if current is None or ACCURACY_RANK[guess_letter.accuracy] < ACCURACY_RANK[current]:
                    best[guess_letter.letter] = guess_letter.accuracy
        return {letter: accuracy.value for letter, accuracy in best.items()}
