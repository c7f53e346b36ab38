"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game_session, websocket_game_required
from .helpers import get_user_identity, serialize_session
from .game_logger import game_logger

__all__ = ['require_game_session', 'websocket_game_required', 'get_user_identity',
           'serialize_session', 'game_logger']
