"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    GameState, GameStatus, GuessLetter, GuessResult, HitAccuracy, WordGuess, describe_guess_result
)

__all__ = [
    'GameState', 'GameStatus', 'GuessLetter', 'GuessResult', 'HitAccuracy', 'WordGuess',
    'describe_guess_result'
]
