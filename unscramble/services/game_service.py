"""
Game Service

Keeps every active single-player game session in memory, keyed by game id,
and fans their state snapshots out to service-level listeners.
"""

import random
import uuid
from typing import Callable, Dict, List, Optional
from ..config.game_settings import WORD_LIST, MAX_NO_OF_WORDS, SCORE_INCREASE
from ..models.game import GameUiState
from .game_session import GameSession
from .word_bank import WordBank

GameListener = Callable[[str, GameUiState], None]


class GameService:
    """
    In-process registry of game sessions.

    This class handles:
    - Session creation with unique game IDs
    - Session lookup and removal
    - Forwarding each session's snapshots as (game_id, state) to listeners
    """

    def __init__(self, seed: Optional[int] = None):
        self.games: Dict[str, GameSession] = {}  # Active sessions by game_id
        self.word_list = WORD_LIST.copy()
        self._rng = random.Random(seed)
        self._listeners: List[GameListener] = []
        self._broadcaster: Optional[GameListener] = None

    def add_listener(self, listener: GameListener) -> None:
        """Register a callback for every snapshot of every session."""
        self._listeners.append(listener)

    def remove_listener(self, listener: GameListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listeners(self) -> List[GameListener]:
        return list(self._listeners)

    def set_broadcaster(self, listener: GameListener) -> None:
        """Install the listener that pushes snapshots to clients, replacing any earlier one."""
        if self._broadcaster is not None:
            self.remove_listener(self._broadcaster)
        self._broadcaster = listener
        self.add_listener(listener)

    def _notify(self, game_id: str, state: GameUiState) -> None:
        for listener in list(self._listeners):
            listener(game_id, state)

    def create_new_game(self) -> str:
        """
        Creates a new game session with its first scrambled word.

        Returns:
            str: Unique game ID for this session

        Raises:
            ExhaustedWordBank: If the word list is smaller than the round limit
        """
        game_id = str(uuid.uuid4())
        session = GameSession(
            WordBank(self.word_list, rng=self._rng),
            max_words=MAX_NO_OF_WORDS,
            score_increase=SCORE_INCREASE,
        )
        session.subscribe(lambda state: self._notify(game_id, state))
        self.games[game_id] = session
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        """Returns the session for game_id, or None if it does not exist."""
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameUiState]:
        """
        Returns the current snapshot for a session.

        Args:
            game_id: Unique game identifier

        Returns:
            GameUiState or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.ui_state

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(seed: Optional[int] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(seed)
    return _game_service
