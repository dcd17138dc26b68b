"""
Game Service

Manages the in-memory game sessions served over HTTP and WebSocket.
"""

import threading
import uuid
from typing import Dict, Optional, Tuple

from ..config.game_settings import MAX_ROUNDS
from ..models.game import GameState, GameStatus, GuessResult
from .dictionary import Dictionary
from .game import Game


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Word selection and secure answer storage
    - Serializing guesses per game so concurrent requests never interleave
    - Game state snapshots that only expose the answer once the game is over
    """

    def __init__(self, dictionary: Optional[Dictionary] = None, max_rounds: int = MAX_ROUNDS):
        self.dictionary = dictionary or Dictionary.from_file()
        self.max_rounds = max_rounds
        self.games: Dict[str, Game] = {}  # Store active games by game_id
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def create_new_game(self, answer: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Args:
            answer: Fixed answer for the session, a random word when omitted

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        game = Game(self.dictionary, answer=answer, max_rounds=self.max_rounds)

        with self._registry_lock:
            self.games[game_id] = game
            self._locks[game_id] = threading.Lock()
        return game_id

    def get_game(self, game_id: str) -> Optional[Game]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session.

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        game = self.games.get(game_id)
        if game is None:
            return None
        return self._build_state(game_id, game)

    def make_guess(self, game_id: str, guess) -> Optional[Tuple[GameState, GuessResult]]:
        """
        Processes a guess and updates game state.

        The raw input is trimmed and lowercased here, at the edge, before the
        case-sensitive game sees it.

        Args:
            game_id: Unique game identifier
            guess: The player's raw input

        Returns:
            Tuple of (updated GameState, GuessResult) or None if game not found
        """
        game = self.games.get(game_id)
        lock = self._locks.get(game_id)
        if game is None or lock is None:
            return None

        with lock:
            if not isinstance(guess, str):
                result = GuessResult.GAME_OVER if game.is_over else GuessResult.INCORRECT_LENGTH
            else:
                _, result = game.guess(guess.strip().lower())
            state = self._build_state(game_id, game)
        return state, result

    def get_answer(self, game_id: str) -> Optional[str]:
        """
        Reveals the answer of a finished game.

        Returns:
            The answer, or None if game not found

        Raises:
            AnswerNotRevealable: If the game is still in progress
        """
        game = self.games.get(game_id)
        if game is None:
            return None
        return game.answer()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._registry_lock:
            if game_id in self.games:
                del self.games[game_id]
                self._locks.pop(game_id, None)
                return True
        return False

    def active_games_count(self) -> int:
        return sum(1 for game in list(self.games.values()) if not game.is_over)

    def _build_state(self, game_id: str, game: Game) -> GameState:
        history = game.guess_history()
        return GameState(
            game_id=game_id,
            current_round=len(history),
            max_rounds=game.max_rounds,
            word_length=game.word_length,
            status=game.status.value,
            game_over=game.is_over,
            won=game.status is GameStatus.WON,
            guesses=[word_guess.word for word_guess in history],
            guess_results=[word_guess.to_pairs() for word_guess in history],
            letter_status=game.letter_status(),
            answer=game.answer() if game.is_over else None
        )


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: Optional[Dictionary] = None,
                            max_rounds: Optional[int] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(dictionary, MAX_ROUNDS if max_rounds is None else max_rounds)
    return _game_service
