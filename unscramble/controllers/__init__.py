"""
Controllers Package

HTTP endpoints of the game server.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
