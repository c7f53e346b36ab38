"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GamePhase, GameUiState

__all__ = ['GamePhase', 'GameUiState']
