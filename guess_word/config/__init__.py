"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and the bundled word list
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    MAX_ROUNDS, WORD_LENGTH, get_word_list, load_word_list, parse_word_list,
    validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'MAX_ROUNDS', 'WORD_LENGTH', 'get_word_list', 'load_word_list', 'parse_word_list',
    'validate_word_list_integrity', 'get_word_statistics'
]
