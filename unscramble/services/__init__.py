"""
Services Package

Contains all business logic and service classes.
"""

from .word_bank import WordBank, ExhaustedWordBank, UnscramblableWordError, normalize
from .game_session import GameSession
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'WordBank', 'ExhaustedWordBank', 'UnscramblableWordError', 'normalize',
    'GameSession',
    'GameService', 'get_game_service', 'initialize_game_service'
]
