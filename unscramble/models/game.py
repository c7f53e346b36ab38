"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum


class GamePhase(Enum):
    """Session phase; a session leaves GAME_OVER only through a reset."""
    IN_PROGRESS = "IN_PROGRESS"
    GAME_OVER = "GAME_OVER"


@dataclass(frozen=True)
class GameUiState:
    """Immutable snapshot of a game session handed to observers."""
    current_scrambled_word: str = ""
    current_word_count: int = 1
    score: int = 0
    is_guessed_word_wrong: bool = False
    is_game_over: bool = False

    @property
    def phase(self) -> GamePhase:
        return GamePhase.GAME_OVER if self.is_game_over else GamePhase.IN_PROGRESS
