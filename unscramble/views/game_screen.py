"""
Game screen model.

Translates a GameUiState snapshot and the pending guess into everything the
client has to draw: the status bar, the scrambled word, the guess field, the
action buttons and, once the game is over, the final score dialog.
"""

from dataclasses import dataclass
from typing import Optional
from ..config.game_settings import MAX_NO_OF_WORDS
from ..config.strings import get_string
from ..models.game import GameUiState


@dataclass(frozen=True)
class FinalScoreDialog:
    title: str
    text: str
    dismiss_label: str
    confirm_label: str


@dataclass(frozen=True)
class GameScreen:
    """Renderable view of one game session."""
    word_count_label: str
    score_label: str
    scrambled_word: str
    instructions: str
    user_guess: str
    guess_label: str
    is_error: bool
    skip_label: str
    submit_label: str
    final_score_dialog: Optional[FinalScoreDialog] = None


def build_game_screen(state: GameUiState, user_guess: str = "",
                      max_words: int = MAX_NO_OF_WORDS) -> GameScreen:
    """
    Build the screen for a snapshot.

    Args:
        state: Current session snapshot
        user_guess: Text in the guess field
        max_words: Round limit shown next to the word count

    Returns:
        GameScreen with the dialog set only when the game is over
    """
    if state.is_guessed_word_wrong:
        guess_label = get_string('wrong_guess')
    else:
        guess_label = get_string('enter_your_word')

    dialog = None
    if state.is_game_over:
        dialog = FinalScoreDialog(
            title=get_string('congratulations'),
            text=get_string('you_scored', state.score),
            dismiss_label=get_string('exit'),
            confirm_label=get_string('play_again'),
        )

    return GameScreen(
        word_count_label=get_string('word_count', state.current_word_count, max_words),
        score_label=get_string('score', state.score),
        scrambled_word=state.current_scrambled_word,
        instructions=get_string('instructions'),
        user_guess=user_guess,
        guess_label=guess_label,
        is_error=state.is_guessed_word_wrong,
        skip_label=get_string('skip'),
        submit_label=get_string('submit'),
        final_score_dialog=dialog,
    )
