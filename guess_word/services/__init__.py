"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary import Dictionary
from .game import AnswerNotRevealable, Game, GuessWordError, score_guess
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'Dictionary',
    'AnswerNotRevealable', 'Game', 'GuessWordError', 'score_guess',
    'GameService', 'get_game_service', 'initialize_game_service'
]
