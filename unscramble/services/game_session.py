"""
Game Session

State machine for a single Unscramble game. The session owns the mutable
game state, pulls words from a WordBank, and publishes an immutable
GameUiState snapshot to its observers after every mutation.
"""

import logging
from dataclasses import replace
from typing import Callable, List, Optional, Set
from ..config.game_settings import MAX_NO_OF_WORDS, SCORE_INCREASE
from ..models.game import GamePhase, GameUiState
from .word_bank import ExhaustedWordBank, WordBank, normalize

logger = logging.getLogger(__name__)

StateObserver = Callable[[GameUiState], None]


class GameSession:
    """
    One player's game, from the first scrambled word to the final score.

    The session is in progress for rounds 1..max_words and moves to game
    over when a round is finished at the limit. Only reset() brings it back.

    Attributes:
        word_bank: Source of words and scrambling
        max_words: Number of rounds per game
        score_increase: Points for each correct guess
    """

    def __init__(self,
                 word_bank: Optional[WordBank] = None,
                 max_words: int = MAX_NO_OF_WORDS,
                 score_increase: int = SCORE_INCREASE):
        """
        Raises:
            ExhaustedWordBank: If the bank has fewer distinct words than max_words
        """
        self.word_bank = word_bank if word_bank is not None else WordBank()
        self.max_words = max_words
        self.score_increase = score_increase

        if len(self.word_bank) < max_words:
            raise ExhaustedWordBank(
                f"A game needs {max_words} distinct words but the bank only has {len(self.word_bank)}"
            )

        self._observers: List[StateObserver] = []
        self._used_words: Set[str] = set()
        self._current_word = ""
        self._user_guess = ""
        self._ui_state = GameUiState()
        self.reset()

    # Read-only views

    @property
    def ui_state(self) -> GameUiState:
        """The latest published snapshot."""
        return self._ui_state

    @property
    def user_guess(self) -> str:
        """Pending guess text, as last typed by the player."""
        return self._user_guess

    @property
    def phase(self) -> GamePhase:
        return self._ui_state.phase

    @property
    def used_words(self) -> frozenset:
        return frozenset(self._used_words)

    # Observers

    def subscribe(self, observer: StateObserver) -> Callable[[], None]:
        """
        Register observer for every new snapshot.

        Returns:
            A callable that removes the observer again
        """
        self._observers.append(observer)
        return lambda: self.unsubscribe(observer)

    def unsubscribe(self, observer: StateObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _publish(self, state: GameUiState) -> None:
        self._ui_state = state
        for observer in list(self._observers):
            observer(state)

    # Player actions

    def update_guess(self, guessed_word: str) -> None:
        """Store the text the player is typing. A stale wrong-guess flag is cleared."""
        self._user_guess = guessed_word
        self._publish(replace(self._ui_state, is_guessed_word_wrong=False))

    def submit_guess(self, guessed_word: Optional[str] = None) -> bool:
        """
        Check the pending guess against the current word.

        A correct guess scores and moves to the next round. A wrong guess
        only raises the wrong-guess flag; the player may retry or skip.

        Args:
            guessed_word: Replaces the pending guess first, without publishing
                a separate snapshot for the buffer change

        Returns:
            bool: True if the guess was correct
        """
        if guessed_word is not None:
            self._user_guess = guessed_word

        if self._ui_state.is_game_over:
            logger.debug("Guess ignored, game is over")
            return False

        if normalize(self._user_guess) == normalize(self._current_word):
            updated_score = self._ui_state.score + self.score_increase
            self._user_guess = ""
            self._advance_round(replace(
                self._ui_state,
                score=updated_score,
                is_guessed_word_wrong=False,
            ))
            return True

        logger.debug("Wrong guess %r for round %d", self._user_guess, self._ui_state.current_word_count)
        self._publish(replace(self._ui_state, is_guessed_word_wrong=True))
        return False

    def skip(self) -> None:
        """Move to the next word without scoring."""
        if self._ui_state.is_game_over:
            logger.debug("Skip ignored, game is over")
            return

        self._user_guess = ""
        self._advance_round(replace(self._ui_state, is_guessed_word_wrong=False))

    def reset(self) -> None:
        """Start over with a fresh first word, count 1 and score 0."""
        self._used_words = set()
        self._user_guess = ""
        self._current_word = self.word_bank.pick_next_word(self._used_words)
        self._publish(GameUiState(
            current_scrambled_word=self.word_bank.scramble_letters(self._current_word),
            current_word_count=1,
            score=0,
            is_guessed_word_wrong=False,
            is_game_over=False,
        ))
        logger.debug("Game reset")

    def _advance_round(self, state: GameUiState) -> None:
        self._used_words.add(self._current_word)

        if state.current_word_count >= self.max_words:
            logger.debug("Game over with score %d", state.score)
            self._publish(replace(state, is_game_over=True))
            return

        self._current_word = self.word_bank.pick_next_word(self._used_words)
        self._publish(replace(
            state,
            current_scrambled_word=self.word_bank.scramble_letters(self._current_word),
            current_word_count=state.current_word_count + 1,
        ))
