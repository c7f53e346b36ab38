"""
Views Package

Screen models the client renders from session snapshots.
"""

from .game_screen import FinalScoreDialog, GameScreen, build_game_screen

__all__ = ['FinalScoreDialog', 'GameScreen', 'build_game_screen']
