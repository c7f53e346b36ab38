"""
Configuration Package

Contains all configuration-related files and settings.

This package separates three types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and the word bank (business logic)
- strings.py: Static UI strings
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LIST, MAX_NO_OF_WORDS, SCORE_INCREASE,
    validate_word_list_integrity, get_word_statistics
)
from .strings import STRINGS, get_string

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LIST', 'MAX_NO_OF_WORDS', 'SCORE_INCREASE',
    'validate_word_list_integrity', 'get_word_statistics',
    # UI strings
    'STRINGS', 'get_string'
]
